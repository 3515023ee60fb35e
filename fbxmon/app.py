"""Application orchestrator — family lookup, fetch, extract, print."""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, TextIO

from fbxmon.config.settings import Settings
from fbxmon.device.fetcher import fetch_page
from fbxmon.device.models import RawPage
from fbxmon.errors import ConfigError, FetchError, UnrecognizedFamily
from fbxmon.metrics import MetricFamily, extract
from fbxmon.output.formatter import describe, format_samples, render

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

FetchFunc = Callable[[str, str], RawPage]


def family_from_program(program: str) -> str:
    """Family name from a plugin symlink name: ``freebox_atm`` -> ``atm``."""
    name = os.path.basename(program)
    if name.endswith(".py"):
        name = name[:-3]
    return name.rsplit("_", 1)[-1]


class Application:
    """Runs one invocation: one family, at most one page fetch."""

    def __init__(
        self,
        settings: Settings | None = None,
        fetcher: FetchFunc | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._fetcher = fetcher or fetch_page
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def run(self, family_name: str, describe_mode: bool = False) -> int:
        try:
            family = MetricFamily.parse(family_name)
        except UnrecognizedFamily as exc:
            # describe errors go to stdout, sample errors to stderr
            stream = self.stdout if describe_mode else self.stderr
            stream.write(f"{exc}\n")
            return EXIT_FAILURE

        if describe_mode:
            self.stdout.write(render(describe(family)))
            return EXIT_OK

        freebox = self.settings.freebox
        try:
            page = self._fetcher(freebox.url, freebox.encoding)
        except (FetchError, ConfigError) as exc:
            logger.error("%s", exc)
            return EXIT_FAILURE

        samples = extract(family, page)
        logger.debug("Extracted %d samples for %s", len(samples), family.value)
        self.stdout.write(render(format_samples(samples)))
        return EXIT_OK
