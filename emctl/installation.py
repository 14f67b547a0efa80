"""Staged installation of mesh components with clean-up on failure."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

__all__ = [
    "InstallPhase",
    "InstallError",
    "StageContext",
    "InstallStage",
    "Installation",
    "wrap",
]


class InstallPhase(enum.Enum):
    """Phases of a stage that can be described."""

    BEGIN = "begin"
    END = "end"
    ERROR = "error"


class InstallError(Exception):
    """Raised when a stage fails its pre-check or installation."""


@dataclass
class StageContext:
    """State shared by the stages of one installation."""

    clear_funcs: list[Callable[["StageContext"], None]] = field(default_factory=list)
    out: TextIO | None = None

    def write(self, text: str) -> None:
        (self.out or sys.stdout).write(text)


HookFunc = Callable[[StageContext], None]
DescribeFunc = Callable[[StageContext, InstallPhase], str]


@dataclass
class InstallStage:
    """One stage: a pre-check, an install step, a clean-up and a description."""

    pre_check: Optional[HookFunc]
    install: HookFunc
    clear_func: Optional[HookFunc]
    describe: DescribeFunc

    def do(self, context: StageContext, installation: "Installation") -> None:
        """Run this stage, then let the installation continue with the next one.

        The clean-up is registered on the context even when installation fails.
        """
        context.write(f"{self.describe(context, InstallPhase.BEGIN)}\n")
        if self.pre_check is not None:
            try:
                self.pre_check(context)
            except Exception as exc:
                raise InstallError(f"pre check installation condition failed: {exc}") from exc

        try:
            self.install(context)
        except Exception as exc:
            context.clear_funcs.append(self.clear_func)
            raise InstallError(f"invoke install func: {exc}") from exc
        context.clear_funcs.append(self.clear_func)

        context.write(
            "Install successfully end, following resource are deployed successfully: "
            f"{self.describe(context, InstallPhase.END)}\n"
        )
        installation.do_install_stage(context)

    def clear(self, context: StageContext) -> None:
        """Run this stage's clean-up, if it has one."""
        if self.clear_func is not None:
            self.clear_func(context)


def wrap(
    pre_check: Optional[HookFunc],
    install: HookFunc,
    clear: Optional[HookFunc],
    describe: DescribeFunc,
) -> InstallStage:
    """Build a stage from its functions."""
    return InstallStage(pre_check=pre_check, install=install, clear_func=clear, describe=describe)


class Installation:
    """Runs stages in order and clears what they installed."""

    def __init__(self, *stages: InstallStage) -> None:
        self.stages = list(stages)
        self.step = 0

    def do_install_stage(self, context: StageContext) -> None:
        """Run the next stage; every stage continues with the one after it."""
        if self.step >= len(self.stages):
            return
        current = self.stages[self.step]
        self.step += 1
        current.do(context, self)

    def clear_resource(self, context: StageContext) -> None:
        """Run every registered clean-up, reporting failures on standard error."""
        for clear in context.clear_funcs:
            if clear is None:
                continue
            try:
                clear(context)
            except Exception as exc:
                sys.stderr.write(f"clear resource error:{exc}\n")