#!/usr/bin/env python3
import argparse
import os
import sys
from windows_images.models import BuildConfiguration
from windows_images.services.image_pipeline_service import TARGETS, ImagePipelineService
from windows_images.utils.logging import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build, test and publish the Windows Jenkins images")
    parser.add_argument('target', nargs='?', default='build', choices=TARGETS, help='Stage to run after the build')
    parser.add_argument('--jenkins-version', default=None, help='Jenkins version to bundle (defaults to $JENKINS_VERSION or the pinned release)')
    parser.add_argument('--dry-run', action='store_true', help='Run in dry-run mode without building, testing or pushing anything')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger("ImageBuilder")

    try:
        config = BuildConfiguration.from_env(os.environ, jenkins_version=args.jenkins_version, dry_run=args.dry_run)
        logger.info(f"Starting {args.target} of {config.organisation}/{config.repository} {config.image_type} images for Jenkins {config.jenkins_version}")
        service = ImagePipelineService(config, args.target)
        service.run()
        logger.info(f"{args.target.capitalize()} finished successfully")
        return 0
    except Exception as e:
        logger.error(f"{args.target.capitalize()} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
