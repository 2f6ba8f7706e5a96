#!/usr/bin/env python3
import argparse
import json
import os
import sys
from artifact_reporter.models import ReporterConfig
from artifact_reporter.errors import PreconditionError
from artifact_reporter.repositories import ActionManifestRepository
from artifact_reporter.services.artifact_report_service import ArtifactReportService
from artifact_reporter.utils.action_io import set_failed, set_output
from artifact_reporter.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def load_event(event_path: str | None) -> dict:
    if not event_path:
        return {}
    try:
        with open(event_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise PreconditionError(f"Unable to read event payload {event_path}: {e}") from e


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Workflow Artifact Reporter")
    parser.add_argument('--dry-run', action='store_true', help='Render the report without writing it to GitHub')
    args = parser.parse_args(argv)

    logger = setup_logger("ArtifactReporter")

    try:
        manifest = os.environ.get("ACTION_MANIFEST", f"{ROOT_DIR}/action.yml")
        config = ReporterConfig.from_env(ActionManifestRepository(manifest).find_inputs())
        event = load_event(os.environ.get("GITHUB_EVENT_PATH"))
        service = ArtifactReportService(
            config,
            os.environ.get("GITHUB_REPOSITORY", ""),
            event,
            dry_run=args.dry_run,
        )
        outputs = service.run()
        if outputs is not None:
            for name, value in outputs.items():
                set_output(name, value)
        logger.info("Artifact report completed successfully")
        return 0
    except Exception as e:
        logger.exception(f"Artifact report failed: {e}")
        set_failed(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
