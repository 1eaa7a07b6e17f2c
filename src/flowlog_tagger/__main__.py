import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import get_settings, load_settings
from .exceptions import ConfigurationError, FlowLogTaggerError
from .logging import set_log_level
from .pipeline_app import run_tagging

MISSING_INPUTS_MESSAGE = (
    "Please provide the paths to the lookup file and the flow log file and protocol-number file"
)
USAGE = "Usage: flowlog-tagger <lookup_file> <flow_log_file> <protocol_number_file>"
COMPLETION_MESSAGE = "Processing completed. Check the output directory for results."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowlog-tagger",
        description="Tag flow log records and count tags and port/protocol combinations",
    )
    parser.add_argument("lookup_file", nargs="?", help="dstport,protocol,tag CSV")
    parser.add_argument("flow_log_file", nargs="?", help="whitespace separated flow log")
    parser.add_argument("protocol_numbers_file", nargs="?", help="protocol number CSV with header")
    parser.add_argument("--output-dir", help="directory for the reports")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument(
        "--csv", dest="export_csv", action="store_true", help="also export counts as CSV"
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not (args.lookup_file and args.flow_log_file and args.protocol_numbers_file):
        print(MISSING_INPUTS_MESSAGE, file=sys.stderr)
        print(USAGE)
        return 0

    try:
        settings = load_settings(args.config) if args.config else get_settings()
        overrides = {}
        if args.output_dir:
            overrides["output_dir"] = Path(args.output_dir)
        if args.export_csv:
            overrides["export_csv"] = True
        if args.log_level:
            overrides["log_level"] = args.log_level
        if overrides:
            settings = settings.model_copy(update=overrides)

        try:
            set_log_level(settings.log_level)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

        run_tagging(
            args.lookup_file,
            args.flow_log_file,
            args.protocol_numbers_file,
            settings=settings,
        )
    except FlowLogTaggerError as exc:
        print(f"An error occurred: {exc.describe()}", file=sys.stderr)
        return 1

    print("Output files generated successfully.")
    print(COMPLETION_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
