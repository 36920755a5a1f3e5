#!/usr/bin/env python
"""Export ms2pip features of peptides to a TSV file.

Input: TSV with columns
- sequence: peptide sequence
- charge: precursor charge
- modifications (optional): e.g. "Carbamidomethyl@C;Oxidation@M"
- mod_sites (optional): 1-based sites, e.g. "3;6"

Output: TSV with one row per fragmentation site: the peptide row number, the
sequence, the ion type, then the 164 feature columns.

Usage:
    python scripts/export_ms2pip_features.py --input peptides.tsv \
        --output features.tsv --ion-type b y
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import csv
import logging

from ms2pipfast.features import FeaturesGenerator, feature_names
from ms2pipfast.modifications import parse_modifications

logger = logging.getLogger(__name__)


def read_peptides(input_path: Path):
    """Read peptide rows from a TSV file."""
    with open(input_path, newline='') as f:
        reader = csv.DictReader(f, delimiter='\t')
        missing = {'sequence', 'charge'} - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"Missing columns in {input_path}: {sorted(missing)}")
        return list(reader)


def export_features(rows, output_path: Path, ion_types):
    """Compute and write the features of every peptide row."""
    generator = FeaturesGenerator()
    n_rows = 0

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f, delimiter='\t')
        writer.writerow(['peptide_row', 'sequence', 'ion_type'] + feature_names())

        for peptide_row, row in enumerate(rows):
            sequence = row['sequence'].strip()
            charge = int(row['charge'])
            modifications = parse_modifications(
                row.get('modifications') or '', row.get('mod_sites') or ''
            )

            for ion_type in ion_types:
                if ion_type == 'b':
                    features = generator.b_ion_features(sequence, charge, modifications)
                else:
                    features = generator.y_ion_features(sequence, charge, modifications)

                for feature_row in features:
                    writer.writerow([peptide_row, sequence, ion_type] + feature_row.tolist())
                n_rows += len(features)

    return n_rows


def main():
    parser = argparse.ArgumentParser(description='Export ms2pip features of peptides')
    parser.add_argument('--input', type=Path, required=True, help='Peptide TSV file')
    parser.add_argument('--output', type=Path, required=True, help='Feature TSV file')
    parser.add_argument('--ion-type', nargs='+', choices=['b', 'y'], default=['b', 'y'],
                        help='Ion types to export (default: b y)')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    rows = read_peptides(args.input)
    logger.info(f"Read {len(rows):,} peptides from {args.input.name}")

    n_rows = export_features(rows, args.output, args.ion_type)
    logger.info(f"✓ Wrote {n_rows:,} feature rows to {args.output}")


if __name__ == '__main__':
    main()
