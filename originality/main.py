from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich import print_json

from originality.factory import create_analyzer
from originality.models.verdict import AnalysisRequest
from originality.services.keyword_service import KeywordService
from originality.utils.config import config
from originality.utils.corpus import load_corpus

app = typer.Typer()


def _read_corpus(corpus_file: Optional[Path]):
    path = corpus_file or config.corpus_file
    try:
        return load_corpus(path)
    except (ValueError, ValidationError, OSError) as e:
        print(f"[bold red]Could not read corpus file {path}: {e}[/bold red]")
        raise typer.Exit(code=1)


@app.command()
def analyze(
    description: str,
    corpus: Optional[Path] = typer.Option(None, "--corpus", "-c", help="YAML or JSON file with competing submissions"),
    offline: bool = typer.Option(False, "--offline", help="Skip Gemini and use keyword analysis only"),
):
    """
    Check how unique a project description is against the other submissions.
    """
    if not description.strip():
        raise typer.BadParameter("Description is required", param_hint="DESCRIPTION")

    request = AnalysisRequest(candidateText=description, corpus=_read_corpus(corpus))
    analyzer = create_analyzer(use_ai=not offline)
    verdict = analyzer.analyze(request.candidateText, request.corpus)
    print_json(verdict.model_dump_json())


@app.command()
def metrics(
    corpus: Optional[Path] = typer.Option(None, "--corpus", "-c", help="YAML or JSON file with submissions"),
):
    """
    Report the average keyword uniqueness across an event's submissions.
    """
    entries = _read_corpus(corpus)
    result = KeywordService().calculate_uniqueness_metrics(entries)
    print_json(result.model_dump_json())


if __name__ == "__main__":
    app()
