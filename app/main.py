"""Entry point: wire services and run a profile or site command."""

import argparse
import asyncio
import sys

import structlog

from api.base import ApiError
from api.client import ApiClient
from api.uploads import UploadFile
from config.constants import LIST_FIELDS, NotificationType, SkinType
from config.logging_config import setup_logging
from notifications.dispatcher import NotificationDispatcher
from notifications.formatter import format_notification, format_profile
from notifications.types import Notification
from profiles.editor import CustomerHealthProfileEditor
from profiles.store import HttpProfileStore
from salon.context import Salon, SalonContext

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="salon-client", description="Salon booking backend client")
    parser.add_argument("--base-url", help="Backend API base URL (defaults to API_BASE_URL)")
    parser.add_argument("--log-level", help="Log level (defaults to LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    profile = sub.add_parser("profile", help="View or edit a customer health profile")
    profile.add_argument("subject_id", help="Customer id")
    profile.add_argument("--salon", help="Salon id (defaults to DEFAULT_SALON_ID)")
    profile.add_argument("--name", default="", help="Customer display name")
    actions = profile.add_subparsers(dest="action", required=True)

    actions.add_parser("show", help="Print the profile")

    add = actions.add_parser("add", help="Append an entry to a list field")
    add.add_argument("field", choices=LIST_FIELDS)
    add.add_argument("value")

    remove = actions.add_parser("remove", help="Remove an entry from a list field by index")
    remove.add_argument("field", choices=LIST_FIELDS)
    remove.add_argument("index", type=int)

    set_ = actions.add_parser("set", help="Set scalar fields")
    set_.add_argument("--dob", help="Date of birth, YYYY-MM-DD")
    set_.add_argument("--skin-type", choices=[s.value for s in SkinType])
    set_.add_argument("--notes")

    photo = actions.add_parser("photo", help="Upload a concern photo")
    photo.add_argument("path")

    newsletter = sub.add_parser("newsletter", help="Subscribe an email to the newsletter")
    newsletter.add_argument("email")

    sub.add_parser("tables", help="List backend database tables")
    return parser


async def run_profile(args: argparse.Namespace, api: ApiClient, dispatcher: NotificationDispatcher) -> int:
    salon = SalonContext(Salon(id=args.salon)) if args.salon else SalonContext.from_settings()
    if salon.current is None:
        print("No salon selected: pass --salon or set DEFAULT_SALON_ID", file=sys.stderr)
        return 2

    editor = CustomerHealthProfileEditor(
        args.subject_id,
        args.name or args.subject_id,
        store=HttpProfileStore(api),
        salon=salon,
        dispatcher=dispatcher,
    )
    await editor.mount()
    controller = editor.controller
    if controller.last_error is not None:
        print(f"Could not load profile: {controller.last_error.message}", file=sys.stderr)
        return 1

    if args.action == "show":
        print("\n".join(format_profile(editor.profile, editor.display_name)))
        return 0

    if args.action == "add":
        editor.set_draft(args.field, args.value)
        if not editor.commit_draft(args.field):
            print("Nothing to add: value is blank", file=sys.stderr)
            return 2
    elif args.action == "remove":
        if not editor.remove_item(args.field, args.index):
            print(f"No {args.field} entry at index {args.index}", file=sys.stderr)
            return 2
    elif args.action == "set":
        if args.dob is not None:
            try:
                editor.set_date_of_birth(args.dob)
            except ValueError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 2
        if args.skin_type is not None:
            editor.set_skin_type(args.skin_type)
        if args.notes is not None:
            editor.set_notes(args.notes)
    elif args.action == "photo":
        try:
            file = UploadFile.from_path(args.path)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        if not await editor.upload_photo(file):
            return 1

    if not editor.is_dirty:
        print("No changes to save")
        return 0
    saved = await editor.save()
    if saved:
        print("\n".join(format_profile(editor.profile, editor.display_name)))
    return 0 if saved else 1


async def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    dispatcher = NotificationDispatcher()

    def print_toast(notif: Notification) -> None:
        print(format_notification(notif), file=sys.stderr if notif.is_error else sys.stdout)

    dispatcher.subscribe(print_toast)

    async with ApiClient(base_url=args.base_url) as api:
        try:
            if args.command == "profile":
                return await run_profile(args, api, dispatcher)
            if args.command == "newsletter":
                message = await api.newsletter.subscribe(args.email)
                await dispatcher.toast(NotificationType.NEWSLETTER_SUBSCRIBED, "Newsletter", message)
                return 0
            if args.command == "tables":
                for table in await api.diagnostics.list_tables():
                    print(table)
                return 0
        except ApiError as e:
            log.error("command_failed", command=args.command, status=e.status, error=e.message)
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
    return 2


def main() -> None:
    """Run the CLI."""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
