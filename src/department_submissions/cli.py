"""Command-line interface for department-submissions."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from department_submissions.clients import OtpClient, SubmissionGateway
from department_submissions.config import client_config, load_config
from department_submissions.exceptions import SubmissionError, ValidationError
from department_submissions.forms import ENTITIES, SubmissionFormController, get_entity
from department_submissions.proxy import create_app

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def serve(args: argparse.Namespace) -> int:
    """Execute the serve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    overrides = {"api_base": args.api_base} if args.api_base else {}
    try:
        app = create_app(overrides)
        logger.info(f"Serving submission proxy on http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port)
        return 0

    except Exception as e:
        logger.error(f"Failed to run submission proxy: {e}")
        return 1


async def _run_submission(
    args: argparse.Namespace,
    data: dict[str, Any],
    settings: dict[str, Any],
) -> int:
    """Walk one draft through verification and submission."""
    logger = logging.getLogger(__name__)
    entity = get_entity(args.entity)

    gateway_config = client_config(settings["portal_url"], timeout=settings["timeout"])
    otp_config = client_config(settings["api_base"], timeout=settings["timeout"])

    async with SubmissionGateway(gateway_config) as gateway, OtpClient(otp_config) as otp_client:
        form = SubmissionFormController(entity, args.department, gateway, otp_client)
        try:
            form.load(data)
            await form.request_otp()
            logger.info(f"Verification code sent to {form.otp.email}")

            code = args.code
            if code is None:
                code = await asyncio.to_thread(input, "Enter the OTP from your inbox: ")
            await form.verify_otp(code)
            logger.info("Email verified")

            result = await form.submit()

        except ValidationError as e:
            logger.error(f"Invalid {entity.label}: {e.message}")
            for field, message in e.errors.items():
                logger.error(f"  {field}: {message}")
            return 1

        except SubmissionError as e:
            logger.error(f"Failed to submit {entity.label}: {e.message}")
            return 1

        except ValueError as e:
            logger.error(f"Invalid draft: {e}")
            return 1

        except EOFError:
            logger.error("No verification code entered")
            return 1

    logger.info(entity.success_message)
    if isinstance(result, dict) and result.get("id"):
        logger.info(f"  ID: {result['id']}")
    return 0


def submit(args: argparse.Namespace) -> int:
    """Execute the submit command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    draft_path = args.draft.resolve()
    if not draft_path.exists():
        logger.error(f"Draft file not found: {draft_path}")
        return 1

    try:
        data = json.loads(draft_path.read_text())
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read draft: {e}")
        return 1

    if not isinstance(data, dict):
        logger.error("Draft file must contain a JSON object")
        return 1

    settings = load_config()
    if args.api_base:
        settings["api_base"] = args.api_base
    if args.portal_url:
        settings["portal_url"] = args.portal_url

    return asyncio.run(_run_submission(args, data, settings))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="department-submissions",
        description="Submit projects, research and journal articles to a department",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the submission proxy",
        description="Serve /api/submissions/* and relay each submission to the upstream content API.",
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST})",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    serve_parser.add_argument(
        "--api-base",
        type=str,
        help="Upstream content API base URL (default: $API_BASE or the campus CDN)",
    )
    serve_parser.set_defaults(func=serve)

    submit_parser = subparsers.add_parser(
        "submit",
        help="Verify your campus email and submit a draft",
        description="Load a JSON draft, verify the submitter's campus email with a one-time password, and submit it for moderation.",
    )
    submit_parser.add_argument(
        "entity",
        choices=sorted(ENTITIES),
        help="Kind of record to submit",
    )
    submit_parser.add_argument(
        "--draft",
        type=Path,
        required=True,
        help="Path to a JSON file with the draft fields",
    )
    submit_parser.add_argument(
        "--department",
        type=str,
        required=True,
        help="Department identifier the submission belongs to",
    )
    submit_parser.add_argument(
        "--portal-url",
        type=str,
        help="Submission proxy base URL (default: $SUBMISSIONS_PORTAL_URL)",
    )
    submit_parser.add_argument(
        "--api-base",
        type=str,
        help="OTP backend base URL (default: $API_BASE or the campus CDN)",
    )
    submit_parser.add_argument(
        "--code",
        type=str,
        help="Verification code, if already received (prompted for otherwise)",
    )
    submit_parser.set_defaults(func=submit)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
