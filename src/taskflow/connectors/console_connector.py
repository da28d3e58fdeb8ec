# src/taskflow/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli import render
from ..cli.commands import CommandReply, ReplyKind
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

_KIND_COLOR = {
    ReplyKind.SUCCESS: render.GREEN,
    ReplyKind.ERROR: render.RED,
    ReplyKind.WARNING: render.YELLOW,
}


def _print_reply(reply: CommandReply, *, color: bool) -> None:
    style = _KIND_COLOR.get(reply.kind)
    if style:
        print(render.paint(reply.text, style, color=color))
    else:
        print(reply.text)


def run_console_loop(state: AppState) -> None:
    """
    Read one line, dispatch it, print the reply; repeat until exit/quit.

    EOF and Ctrl+C end the loop the same way as `exit`.
    """
    color = state.color
    settings = state.settings
    prompt = render.format_prompt(str(getattr(settings, "prompt", "taskflow> ")), color=color)

    logger.info("Console connector started.")
    if getattr(settings, "show_banner", True):
        print(render.format_banner(str(getattr(settings, "app_name", "TaskFlow")), color=color))
        print(command_registry.build_help(state))
        print()

    while True:
        try:
            line = input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            print("Goodbye!")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            print("Goodbye!")
            break

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = CommandReply("Internal error while handling a command.", ReplyKind.ERROR)

        if reply is None:
            continue

        _print_reply(reply, color=color)
        if reply.exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
