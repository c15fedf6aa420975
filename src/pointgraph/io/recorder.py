# io/recorder.py
"""
Fan-out for the renderer step stream.

TourLogging hands every TreeEdgeAdded, WalkStepTaken and GreedyStepTaken event
to a Recorder, which writes it to each sink in order: MemorySink keeps the
events for in-process renderers, JsonlSink writes one JSON object per line to
a text stream. Sink errors propagate to the caller.
"""

import json
import sys
from dataclasses import asdict
from typing import Protocol


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            s.write(ev)
