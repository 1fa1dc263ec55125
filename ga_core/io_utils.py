"""
I/O utilities for the GA core.

Integer projections of populations for downstream visualization, and CSV
export/import of a run's history.
"""

import csv
from pathlib import Path
from typing import Dict, List, Sequence, Union

from .data_models import Chromosome


HISTORY_FIXED_COLUMNS = ['generation', 'chromosome', 'row']


def population_to_matrix(population: Sequence[Chromosome]) -> List[List[int]]:
    """
    Stack the integer rows of every chromosome.

    Each chromosome contributes its genotype row followed by its phenotype
    row, so the matrix has 2 * len(population) rows.
    """
    matrix = []
    for chromosome in population:
        matrix.extend(chromosome.to_rows())
    return matrix


def history_to_matrices(history: Sequence[Sequence[Chromosome]]) -> List[List[List[int]]]:
    return [population_to_matrix(population) for population in history]


def save_history_to_csv(
    history: Sequence[Sequence[Chromosome]],
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save the integer projection of a run's history to CSV file.

    CSV format:
        generation,chromosome,row,locus_0,locus_1,...
        0,0,genotype,3,7,...
        0,0,phenotype,3,7,...

    Args:
        history: Populations in generation order
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    # Create parent directory if needed
    output_path.parent.mkdir(parents=True, exist_ok=True)

    num_loci = 0
    for population in history:
        for chromosome in population:
            num_loci = max(num_loci, chromosome.size)

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(HISTORY_FIXED_COLUMNS + [f"locus_{i}" for i in range(num_loci)])

        for generation, population in enumerate(history):
            for index, chromosome in enumerate(population):
                geno_row, pheno_row = chromosome.to_rows()
                writer.writerow([generation, index, 'genotype'] + geno_row)
                writer.writerow([generation, index, 'phenotype'] + pheno_row)

    return output_path


def load_history_matrix_csv(csv_path: Union[str, Path]) -> Dict[int, List[List[int]]]:
    """
    Load a history CSV written by save_history_to_csv.

    Args:
        csv_path: Path to CSV file

    Returns:
        Dictionary mapping generation index to its integer matrix

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV format is invalid
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    matrices: Dict[int, List[List[int]]] = {}
    with open(csv_path, 'r', newline='') as f:
        reader = csv.reader(f)
        header = next(reader, None)

        if header is None or header[:3] != HISTORY_FIXED_COLUMNS:
            raise ValueError(
                f"Invalid CSV format in {csv_path}. "
                f"Expected columns: {','.join(HISTORY_FIXED_COLUMNS)},locus_0,..."
            )

        for line_number, row in enumerate(reader, start=2):
            if not row:
                continue
            if len(row) < 3:
                raise ValueError(
                    f"Expected at least {len(HISTORY_FIXED_COLUMNS)} columns on line "
                    f"{line_number} of {csv_path}, got {len(row)}"
                )
            if row[2] not in ('genotype', 'phenotype'):
                raise ValueError(f"Invalid row kind '{row[2]}' on line {line_number} of {csv_path}")
            try:
                generation = int(row[0])
                values = [int(value) for value in row[3:] if value != '']
            except ValueError:
                raise ValueError(f"Non-integer value on line {line_number} of {csv_path}")
            matrices.setdefault(generation, []).append(values)

    return matrices
