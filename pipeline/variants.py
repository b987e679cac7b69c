"""Batch pipeline expanding the emoji catalog into every skin tone variant."""
import json
from typing import Any, Dict, List, Optional

import apache_beam as beam
from apache_beam.io import WriteToText
from apache_beam.options.pipeline_options import PipelineOptions

from emoji_picker.catalog import DEFAULT_CATALOG_PATH
from emoji_picker.transforms.variants import ExpandSkinTones, ValidateEmojiRecord
from emoji_picker.utils import get_logger

logger = get_logger(__name__)


def read_catalog_records(path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Read raw catalog records without validation; validation happens in the pipeline."""
    with open(path or DEFAULT_CATALOG_PATH, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Catalog {path or DEFAULT_CATALOG_PATH} is not a JSON list")
    return data


def run_variants_pipeline(records: List[Dict[str, Any]], output_prefix: str = 'output/emoji_variants') -> None:
    """Run the variant export locally with the DirectRunner."""
    logger.info(f"Expanding {len(records)} catalog records into skin tone variants...")

    options = PipelineOptions(['--runner=DirectRunner'])

    with beam.Pipeline(options=options) as p:
        validated = (p
                     | 'Create Catalog' >> beam.Create(records)
                     | 'Validate Records' >> beam.ParDo(ValidateEmojiRecord()).with_outputs('valid', 'invalid'))

        (validated.valid
         | 'Expand Skin Tones' >> beam.ParDo(ExpandSkinTones())
         | 'Format Variants' >> beam.Map(lambda x: json.dumps(x, ensure_ascii=False))
         | 'Write Variants' >> WriteToText(output_prefix, file_name_suffix='.jsonl'))

        (validated.invalid
         | 'Format Dead Letters' >> beam.Map(lambda x: json.dumps(x, ensure_ascii=False, default=str))
         | 'Write Dead Letters' >> WriteToText(f'{output_prefix}_dead_letter', file_name_suffix='.jsonl'))

    logger.info(f"Variant export completed - check {output_prefix}*.jsonl")
