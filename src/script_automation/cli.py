"""
CLI entrypoint. After `pip install -e .`:
  script-automation generate article.txt --count 3 --words 300-500 [--style storytelling] [--platform douyin]
  script-automation batch input.csv results.csv [--export] [--notify USER_ID]
  script-automation export results.csv
  script-automation test-api
  script-automation analyze article.txt
or `python -m script_automation ...`.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from script_automation.domain.errors import ScriptGenerationError
from script_automation.domain.models import GenerationRequest
from script_automation.prompting.catalog import PLATFORM_SETTINGS, STYLE_TEMPLATES


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _cmd_generate(args) -> int:
    from script_automation.application.generator import ScriptGenerator
    from script_automation.postprocess import format_for_platform

    request = GenerationRequest(
        source_content=_read_text(args.file),
        script_count=args.count,
        word_count_range=args.words or "",
        style=args.style,
        platform=args.platform,
    )
    generator = ScriptGenerator.from_config()

    print(f"\n[1/2] Generating {request.script_count} scripts...")
    scripts = generator.generate(request)
    print(f"✅ Got {len(scripts)} scripts")

    print("\n[2/2] Writing results...")
    if args.output:
        data = [s.as_dict() for s in scripts]
        Path(args.output).write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        print(f"✅ Saved to: {args.output}")
    else:
        for i, script in enumerate(scripts, 1):
            body = format_for_platform(script, args.platform) if args.format and args.platform else script.content
            print("\n" + "=" * 60)
            print(f"Script {i}: {script.theme}")
            if script.hook:
                print(f"Hook: {script.hook}")
            print("-" * 60)
            print(body)
    return 0


def _build_pipeline(input_path, results_path, with_generator=True):
    from script_automation.adapters import CsvWorkQueue, default_adapters
    from script_automation.application.generator import ScriptGenerator
    from script_automation.application.pipeline import BatchPipeline
    from script_automation.config import BATCH_DELAY

    generator = ScriptGenerator.from_config() if with_generator else None
    return BatchPipeline(
        generator=generator,
        queue=CsvWorkQueue(input_path, results_path),
        delay=BATCH_DELAY,
        **default_adapters(),
    )


def _cmd_batch(args) -> int:
    pipeline = _build_pipeline(args.input, args.results)
    report = pipeline.process_latest() if args.latest else pipeline.process_pending()
    if args.export or args.notify:
        reference = pipeline.export()
        if reference and args.notify:
            pipeline.notify(args.notify, reference)
    if args.latest:
        return 0 if report is None or report.success else 1
    return 0


def _cmd_export(args) -> int:
    pipeline = _build_pipeline(None, args.results, with_generator=False)
    reference = pipeline.export(args.title)
    return 0 if reference else 1


def _cmd_test_api(args) -> int:
    from script_automation.llm.client import CompletionClient

    client = CompletionClient.from_config()
    reply = client.test_connection()
    print(f"✅ API connection successful.\n\nResponse: {reply}")
    return 0


def _cmd_analyze(args) -> int:
    from script_automation.postprocess import analyze_content

    analysis = analyze_content(_read_text(args.file))
    print("Content Analysis:\n")
    print(f"Length: {analysis.length} characters")
    print(f"Paragraphs: {analysis.paragraphs}")
    print(f"Contains Numbers: {'Yes' if analysis.has_numbers else 'No'}")
    print(f"Contains Quotes: {'Yes' if analysis.has_quotes else 'No'}")
    print(f"\nTop Keywords:\n{', '.join(analysis.keywords)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Repurpose long-form articles into short-video scripts with an LLM"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate scripts from a text file")
    gen.add_argument("file", help="Article text file (UTF-8)")
    gen.add_argument("--count", type=int, default=3, help="Number of scripts")
    gen.add_argument("--words", type=str, default="", help='Word count range, e.g. "300-500"')
    gen.add_argument("--style", choices=sorted(STYLE_TEMPLATES), help="Script style")
    gen.add_argument("--platform", choices=sorted(PLATFORM_SETTINGS), help="Target platform")
    gen.add_argument("--format", action="store_true", help="Apply platform formatting to output")
    gen.add_argument("--output", type=str, help="Write scripts as JSON instead of printing")
    gen.set_defaults(func=_cmd_generate)

    batch = sub.add_parser("batch", help="Process pending rows of an input CSV")
    batch.add_argument("input", help="Input CSV (submissions)")
    batch.add_argument("results", help="Results CSV (appended)")
    batch.add_argument("--latest", action="store_true", help="Process only the latest entry")
    batch.add_argument("--export", action="store_true", help="Export results to a document afterwards")
    batch.add_argument("--notify", type=str, metavar="RECIPIENT", help="Notify this user with the document link")
    batch.set_defaults(func=_cmd_batch)

    export = sub.add_parser("export", help="Export a results CSV to a Markdown document")
    export.add_argument("results", help="Results CSV")
    export.add_argument("--title", type=str, help="Document title")
    export.set_defaults(func=_cmd_export)

    test_api = sub.add_parser("test-api", help="Check the configured LLM provider")
    test_api.set_defaults(func=_cmd_test_api)

    analyze = sub.add_parser("analyze", help="Show basic statistics and keywords for a text file")
    analyze.add_argument("file")
    analyze.set_defaults(func=_cmd_analyze)
    return parser


def main(argv=None) -> int:
    from script_automation.config import LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ScriptGenerationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
