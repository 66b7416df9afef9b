"""Interviewer framework for choosing among ambiguous tweak targets."""

from csstweaks.interviewer.auto_select import AutoSelectInterviewer
from csstweaks.interviewer.base import Interviewer
from csstweaks.interviewer.callback import CallbackInterviewer
from csstweaks.interviewer.console import ConsoleInterviewer
from csstweaks.interviewer.queue_interviewer import QueueInterviewer

__all__ = [
    "Interviewer",
    "AutoSelectInterviewer",
    "CallbackInterviewer",
    "ConsoleInterviewer",
    "QueueInterviewer",
]
