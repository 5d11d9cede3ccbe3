# flake8: noqa E501

from gettext import gettext as _
from pathlib import Path

COMMAND_DESCRIPTION = _("Replay a recorded pointer session and list the resulting fields")


def command(subparser):
    subparser.add_argument("events", type=Path, help=_("JSON file with a list of actions"))
    subparser.add_argument(
        "-p", "--pages", dest="pages", type=int, default=1, help=_("Number of pages in the document")
    )
    subparser.add_argument(
        "--offset",
        dest="offset",
        type=float,
        nargs=2,
        default=(0.0, 0.0),
        metavar=("LEFT", "TOP"),
        help=_("On-screen position of the page container"),
    )
    subparser.add_argument(
        "--page-size",
        dest="page_size",
        type=int,
        nargs=2,
        default=(612, 792),
        metavar=("WIDTH", "HEIGHT"),
        help=_("Page size used when rendering"),
    )
    subparser.add_argument(
        "-r", "--render", dest="render", type=Path, help=_("Write the current page with its fields to this image")
    )
    subparser.add_argument(
        "--sequential-ids",
        dest="sequential_ids",
        action="store_true",
        help=_("Name fields field-1, field-2, ... instead of random ids"),
    )

    def handle(args):
        from .replay import handle as replay_handle

        replay_handle(args)

    return handle
