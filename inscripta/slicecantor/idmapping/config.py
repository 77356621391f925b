from dataclasses import field
from typing import Any, Dict

from marshmallow import ValidationError, validate
from marshmallow_dataclass import dataclass

from inscripta.slicecantor.exc import ValidationException
from inscripta.slicecantor.models.models import BaseModel


@dataclass
class TranscriptScoreBuilderConfig(BaseModel):
    """Tunables of :class:`~slicecantor.idmapping.TranscriptScoreBuilder`."""

    # transcript pairs must score above this to enter the scoring matrix
    transcript_score_threshold: float = field(default=0.0, metadata={"validate": validate.Range(min=0, max=1)})
    # score given to perfectly matching transcripts whose translations differ
    different_translation_score: float = field(default=0.98, metadata={"validate": validate.Range(min=0, max=1)})
    # multiplier for transcript scores whose genes were not mapped to each other
    non_mapped_gene_penalty: float = field(default=0.8, metadata={"validate": validate.Range(min=0, max=1)})

    @staticmethod
    def from_dict(params: Dict[str, Any]) -> "TranscriptScoreBuilderConfig":
        """Loads and validates a configuration from plain parameters, e.g. parsed from a JSON or YAML file."""
        try:
            return TranscriptScoreBuilderConfig.Schema().load(params)
        except ValidationError as err:
            raise ValidationException(f"Invalid transcript scoring configuration: {err.messages}") from err
