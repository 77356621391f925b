from inscripta.slicecantor.sequence.sequence import reverse_complement, unknown_sequence, UNKNOWN_BASE  # noqa: F401
