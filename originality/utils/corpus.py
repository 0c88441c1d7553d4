"""
Loading competing submissions from YAML or JSON files.
"""

from pathlib import Path
from typing import List

import yaml

from originality.models.verdict import CompetingEntry
from originality.utils.logger import logger


def load_corpus(path: Path) -> List[CompetingEntry]:
    """
    Load competing submissions from a file.

    The file holds either a list of submissions or a mapping with a
    `submissions` list. Each submission has title, description and teamName.
    A missing file is an empty corpus.
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Corpus file {path} not found, using an empty corpus")
        return []

    with open(path, 'r') as file:
        data = yaml.safe_load(file) or []

    if isinstance(data, dict):
        data = data.get('submissions', [])
    if not isinstance(data, list):
        raise ValueError(f"Corpus file {path} must contain a list of submissions")

    return [CompetingEntry.model_validate(item) for item in data]
