#!/usr/bin/env python3
"""
Generate a bookmark name from the commits in a revision range, then create and
push it with jj:
- Revision range (positional change, --from, or a combined --revision)
- Log format used to render the commit messages
- Sampling controls and model for the generation backend
- Optional prefix, strict naming and dry-run mode
"""

import argparse
import logging
import os
import sys

from bookmark_namer.errors import BookmarkNamerError
from bookmark_namer.naming.domain.prompt_config import default_prompt_config
from bookmark_namer.naming.domain.value_objects import (
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_K,
    DEFAULT_TOP_P,
    NameStrictness,
    SamplingOptions,
)
from bookmark_namer.naming.repositories.factory import PROVIDERS, create_llm_agent, load_env_file
from bookmark_namer.naming.repositories.interfaces import LLMAgentRepository
from bookmark_namer.naming.services.naming_service import NamingService
from bookmark_namer.naming.services.prompt_builder import PromptBuilder
from bookmark_namer.vcs.domain.value_objects import LogFormat
from bookmark_namer.vcs.repositories.implementations import JujutsuRepositoryImpl
from bookmark_namer.vcs.repositories.interfaces import VcsRepository
from bookmark_namer.vcs.services.history_service import HistoryService
from bookmark_namer.vcs.services.publisher_service import PublisherService
from bookmark_namer.vcs.services.revision_resolver import resolve_revisions
from bookmark_namer.workflow import BookmarkWorkflow, WorkflowOptions

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "BOOKMARK_NAMER_DEBUG"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="bookmark-namer",
        description=(
            "Summarize the commits in a revision range into a bookmark name "
            "using a language model, then create and push the bookmark with jj"
        ),
    )
    parser.add_argument(
        "change",
        type=str,
        nargs="?",
        default=None,
        help="Revision the range ends at and the bookmark points to (default: @)",
    )
    parser.add_argument(
        "--from",
        dest="from_rev",
        type=str,
        default=None,
        help="Revision the range starts from (default: trunk())",
    )
    parser.add_argument(
        "--revision",
        "-r",
        type=str,
        default=None,
        help=(
            "Combined revset to summarize, e.g. 'trunk()..@' (the default). "
            "Cannot be used with change or --from."
        ),
    )
    parser.add_argument(
        "--log-format",
        type=LogFormat,
        choices=list(LogFormat),
        default=LogFormat.ONE_LINE,
        metavar="{one-line,full}",
        help="Summarize first lines only or full descriptions (default: one-line)",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Prefix placed before the generated name, e.g. 'feature' gives feature/<name>",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the jj commands instead of running them",
    )
    parser.add_argument(
        "--no-allow-new",
        dest="allow_new",
        action="store_false",
        help="Do not pass --allow-new when pushing the bookmark",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=(
            "Ask the backend for a schema-constrained name of 3-5 lowercase words "
            "and reject anything else (ollama only)"
        ),
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=DEFAULT_TEMPERATURE,
        help=f"Creativity of the answer (default: {DEFAULT_TEMPERATURE})",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=DEFAULT_TOP_K,
        help=f"Number of candidate tokens considered (default: {DEFAULT_TOP_K})",
    )
    parser.add_argument(
        "--top-p",
        type=float,
        default=DEFAULT_TOP_P,
        help=f"Nucleus sampling on top of --top-k (default: {DEFAULT_TOP_P})",
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=None,
        help="Cap on generated tokens, to cut off long answers",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model name (default depends on the provider, llama3.2 for ollama)",
    )
    parser.add_argument(
        "--provider",
        type=str.lower,
        choices=PROVIDERS,
        default=None,
        help="Generation backend (default: LLM_PROVIDER or ollama)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help=f"Enable debug logging (also enabled by {DEBUG_ENV_VAR})",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Configure logging once for the process."""
    level = logging.DEBUG if verbose or os.getenv(DEBUG_ENV_VAR) else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s %(name)s] %(message)s")


def options_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> WorkflowOptions:
    """Validate parsed arguments and turn them into workflow options."""
    try:
        resolve_revisions(args.revision, args.from_rev, args.change)
        sampling = SamplingOptions(
            temperature=args.temperature,
            top_k=args.top_k,
            top_p=args.top_p,
            max_tokens=args.max_tokens,
        )
    except ValueError as e:
        parser.error(str(e))

    return WorkflowOptions(
        revision=args.revision,
        from_rev=args.from_rev,
        to_rev=args.change,
        log_format=args.log_format,
        sampling=sampling,
        strictness=NameStrictness.STRICT if args.strict else NameStrictness.LENIENT,
        model=args.model,
        prefix=args.prefix,
        dry_run=args.dry_run,
        allow_new=args.allow_new,
    )


def run(
    options: WorkflowOptions,
    llm_agent: LLMAgentRepository,
    vcs_repository: VcsRepository,
) -> int:
    """
    Run the pipeline once and report the outcome.

    Returns:
        Process exit code
    """
    workflow = BookmarkWorkflow(
        history_service=HistoryService(vcs_repository),
        naming_service=NamingService(
            llm_agent, prompt_builder=PromptBuilder(default_prompt_config(options.strictness))
        ),
        publisher_service=PublisherService(vcs_repository),
    )

    try:
        outcome = workflow.run(options)
    except BookmarkNamerError as e:
        print(f"✗ {e}", file=sys.stderr)
        return e.exit_code

    if not outcome.dry_run:
        print(f"✓ Bookmark {outcome.branch_name.value} created and pushed")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main function to parse arguments, wire services and run the pipeline."""
    parser = build_parser()
    args = parser.parse_args(argv)
    load_env_file()
    configure_logging(args.verbose)

    options = options_from_args(parser, args)

    try:
        llm_agent = create_llm_agent(provider=args.provider, model_name=args.model)
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        print("  Hint: Set LLM_PROVIDER and API keys in .env file or environment", file=sys.stderr)
        sys.exit(1)

    logger.debug("Using %s with model %s", type(llm_agent).__name__, llm_agent.default_model)

    try:
        exit_code = run(options, llm_agent, JujutsuRepositoryImpl())
    except KeyboardInterrupt:
        print("\n✗ Interrupted", file=sys.stderr)
        sys.exit(130)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
