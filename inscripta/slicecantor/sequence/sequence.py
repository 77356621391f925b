from Bio.Seq import Seq

UNKNOWN_BASE = "N"


def reverse_complement(sequence: str) -> str:
    """Reverse complement a nucleotide string. IUPAC ambiguity codes and case are preserved."""
    return str(Seq(sequence).reverse_complement())


def unknown_sequence(length: int) -> str:
    """Placeholder sequence for positions whose bases are not known."""
    return UNKNOWN_BASE * max(length, 0)
