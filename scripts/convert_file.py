#!/usr/bin/env python3
"""
Functional conversion check - shows the assembled document for a Markdown file.

Runs the full ConversionPipeline:
- Title rendering (title template + fallback)
- Markdown normalization
- Frontmatter / backmatter rendering (with --template)

Usage:
    python scripts/convert_file.py FILE.md [METADATA.json] [--template] [--save] [--verbose]

Example:
    python scripts/convert_file.py clipped/article.md clipped/article.json --template --save
"""
import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markclip.logging_config import setup_logging
from markclip.pipeline import conversion_pipeline


def convert_file(markdown_path: Path, metadata_path: Path | None, template: bool, save: bool) -> None:
    """Convert a Markdown file with the complete pipeline."""
    print(f"\n{'=' * 60}")
    print(f"Converting: {markdown_path}")
    print(f"{'=' * 60}\n")

    try:
        markdown = markdown_path.read_text(encoding="utf-8")
        metadata = {"pageTitle": markdown_path.stem}
        if metadata_path:
            metadata.update(json.loads(metadata_path.read_text(encoding="utf-8")))

        result = conversion_pipeline.process(markdown, metadata, include_template=template)

        print("Statistics:")
        print(f"   - Input length: {len(markdown)} chars")
        print(f"   - Output length: {len(result.markdown)} chars")
        print(f"   - Title: {result.title}")
        print(f"   - Pipeline steps: {', '.join(result.steps_applied)}")

        if save:
            output_path = markdown_path.with_name(f"{markdown_path.stem}.normalized.md")
            output_path.write_text(result.markdown, encoding="utf-8")
            print(f"\nSaved: {output_path}")
        else:
            print(f"\n{'─' * 60}")
            print("MARKDOWN:")
            print(f"{'─' * 60}\n")
            print(result.markdown)

    except (OSError, ValueError) as e:
        print(f"Error: {e}")


def main():
    args = sys.argv[1:]
    save = "--save" in args
    template = "--template" in args
    verbose = "--verbose" in args
    args = [a for a in args if a not in ("--save", "--template", "--verbose")]
    if not args:
        print(__doc__)
        sys.exit(1)
    setup_logging(level="DEBUG" if verbose else "WARNING", log_format="text")
    metadata_path = Path(args[1]) if len(args) > 1 else None
    convert_file(Path(args[0]), metadata_path, template=template, save=save)


if __name__ == "__main__":
    main()
