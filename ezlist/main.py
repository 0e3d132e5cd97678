"""Entry point opening the ezlist demo window."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import wx

from .controller import ListController
from .core.source import ListSource
from .log import configure_logging, install_exception_hooks, logger
from .settings import EzListSettings, load_settings
from .ui.demo_data import build_demo_contacts, build_demo_sections
from .ui.sectioned_list import SectionedListCtrl, bind_lifecycle

APP_NAME = "ezlist"


class DemoFrame(wx.Frame):
    """Top-level window hosting a :class:`SectionedListCtrl`."""

    def __init__(self, parent: wx.Window | None, *, settings: EzListSettings) -> None:
        super().__init__(parent=parent, title="ezlist demo")
        self.contacts = build_demo_contacts()
        self.controller = ListController()
        panel = wx.Panel(self)
        sizer = wx.BoxSizer(wx.VERTICAL)
        panel.SetSizer(sizer)

        source = ListSource(
            lambda: build_demo_sections(self.contacts, self._on_contacts_changed),
            settings=settings.source,
        )
        self.controller.prepare(source)
        self.list = SectionedListCtrl(
            panel,
            source,
            column_title=settings.ui.column_title,
            detail_column_title=settings.ui.detail_column_title,
        )
        sizer.Add(self.list, 1, wx.EXPAND | wx.ALL, self.FromDIP(8))
        bind_lifecycle(self, self.controller)
        self.SetSize(self.FromDIP((settings.ui.window_width, settings.ui.window_height)))
        panel.Layout()

    def _on_contacts_changed(self) -> None:
        wx.CallAfter(self.controller.will_appear)


class EzListApp(wx.App):
    """wx.App that logs unhandled GUI exceptions."""

    def OnExceptionInMainLoop(self) -> None:  # pragma: no cover - GUI path
        try:
            logger.exception("Unhandled exception in GUI main loop", exc_info=sys.exc_info())
        finally:
            super().OnExceptionInMainLoop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="ezlist demo window")
    parser.add_argument("--settings", help="path to a TOML or JSON settings file")
    parser.add_argument(
        "--debug-assertions",
        action="store_true",
        help="raise on stale list coordinates instead of only logging them",
    )
    parser.add_argument("--log-dir", help="directory for ezlist log files")
    return parser


def resolve_settings(args: argparse.Namespace) -> EzListSettings:
    """Load settings from ``--settings`` and apply command-line overrides."""
    settings = load_settings(args.settings) if args.settings else EzListSettings()
    if args.debug_assertions:
        settings.source.debug_assertions = True
    return settings


def main(argv: Sequence[str] | None = None) -> None:
    """Run the wx application with the demo frame."""
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    configure_logging(settings.ui.log_level, log_dir=args.log_dir)
    install_exception_hooks()
    logger.debug(
        "Starting demo (debug_assertions=%s)", settings.source.debug_assertions
    )
    app = EzListApp()
    frame = DemoFrame(None, settings=settings)
    frame.Show()
    app.MainLoop()


if __name__ == "__main__":  # pragma: no cover
    main()
