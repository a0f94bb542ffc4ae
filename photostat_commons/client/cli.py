#!/usr/bin/env python3
"""
photostat command line

Upload party photos, watch them develop and ask for a text when they are ready.
"""
import argparse
import sys
from typing import List, Optional
from ..config import config
from ..exceptions import PhotostatError
from .api_client import PhotostatClient
from .countdown import Countdown
from .notification import NotificationForm
from .orchestrator import UploadOrchestrator, UploadTask, WorkflowStage
from .session_state import JsonFileSessionState


def build_orchestrator(client: PhotostatClient, session_state) -> UploadOrchestrator:
    bucket_name = config.photo_bucket_name
    if not bucket_name:
        raise PhotostatError("Photo bucket not configured (set PHOTOSTAT_PHOTO_BUCKET_NAME)", 'CONFIGURATION_ERROR')
    return UploadOrchestrator(
        issuer=client,
        transport=client,
        session_state=session_state,
        bucket_name=bucket_name,
        region=config.aws_region
    )


def develop_countdown(use_duration: bool) -> Countdown:
    if use_duration:
        return Countdown(config.develop_duration_seconds)
    return Countdown.until(config.develop_target)


def show_countdown(countdown: Countdown, follow: bool) -> None:
    print("photos take 24 hours to develop. check back in")
    print(countdown.format())
    if follow:
        try:
            countdown.run(lambda c: print(f"\r{c.format()}", end='', flush=True), stop_at_zero=True)
        except KeyboardInterrupt:
            pass
        print()


def cmd_upload(args, client, session_state) -> int:
    orchestrator = build_orchestrator(client, session_state)
    tasks = orchestrator.select_files([UploadTask.from_path(path) for path in args.files])
    if not tasks:
        print("upload at least 1 party picture to access", file=sys.stderr)
        return 1

    results = orchestrator.access()
    for result in results:
        if result.success:
            print(f"uploaded {result.task.filename} -> {result.public_url}")
        else:
            print(f"failed   {result.task.filename}: {result.error}", file=sys.stderr)

    if orchestrator.upload_error:
        print(f"Error uploading file: {orchestrator.upload_error}", file=sys.stderr)

    if orchestrator.stage == WorkflowStage.COUNTDOWN:
        show_countdown(develop_countdown(args.duration), follow=False)
    return 0 if all(result.success for result in results) else 1


def cmd_countdown(args, client, session_state) -> int:
    show_countdown(develop_countdown(args.duration), follow=args.follow)
    return 0


def cmd_notify(args, client, session_state) -> int:
    form = NotificationForm(client)
    form.open()
    form.update(args.phone)
    if form.submit():
        print(form.confirmation_message)
        return 0
    print(form.phone_error, file=sys.stderr)
    return 1


def cmd_status(args, client, session_state) -> int:
    stage = WorkflowStage.COUNTDOWN if session_state.has_uploaded else WorkflowStage.UPLOAD
    print(stage.value)
    return 0


def cmd_reset(args, client, session_state) -> int:
    session_state.clear()
    print("upload")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="photostat", description="Upload party photos and wait for them to develop")
    parser.add_argument("--api-url", default=None, help="API base URL (default from config)")
    parser.add_argument("--session-file", default=None, help="Where to keep the local completion marker")

    subparsers = parser.add_subparsers(dest="command", required=True)

    upload = subparsers.add_parser("upload", help="Upload one or more photos")
    upload.add_argument("files", nargs="+", help="Image files to upload")
    upload.add_argument("--duration", action="store_true", help="Show the fixed 24h countdown instead of the develop date")
    upload.set_defaults(func=cmd_upload)

    countdown = subparsers.add_parser("countdown", help="Show time left until photos are developed")
    countdown.add_argument("--follow", "-f", action="store_true", help="Keep updating once per second")
    countdown.add_argument("--duration", action="store_true", help="Count down a fixed 24h instead of the develop date")
    countdown.set_defaults(func=cmd_countdown)

    notify = subparsers.add_parser("notify", help="Get a text when photos are ready")
    notify.add_argument("phone", help="Phone number, any formatting")
    notify.set_defaults(func=cmd_notify)

    status = subparsers.add_parser("status", help="Show the current stage")
    status.set_defaults(func=cmd_status)

    reset = subparsers.add_parser("reset", help="Forget that photos were uploaded")
    reset.set_defaults(func=cmd_reset)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    client = PhotostatClient(args.api_url or config.api_base_url)
    session_state = JsonFileSessionState(args.session_file or config.session_file)

    try:
        return args.func(args, client, session_state)
    except PhotostatError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: could not update session file: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
