"""A small log that indents messages under the tasks that produced them.

Important functions:
 - task: a context manager that wraps a self-contained piece of work and
   records how long it took
 - event: print a log message, indented under the active tasks

Nothing is printed unless the `verbose` option is set.  Timings are always
collected; `dump_profile` writes them out.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from polyquad.opts import Option

verbose = Option("verbose", bool, False, description="Report parsing and integration progress on stderr")
profile = Option("profile", str, "", description="Write per-task timings to this file when done", metavar="PATH")

_times = defaultdict(float)
_counts = defaultdict(int)
_task_stack = []
_begin = datetime.datetime.now()

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _indent(depth):
    return "  " * depth

def task_begin(name, **kwargs):
    _task_stack.append((name, datetime.datetime.now()))
    if not verbose.value:
        return
    details = ""
    if kwargs:
        details = " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"
    log("{}{}{}...".format(_indent(len(_task_stack) - 1), name, details))

def task_end():
    key = tuple(name for name, start in _task_stack)
    name, start = _task_stack.pop()
    duration = (datetime.datetime.now() - start).total_seconds()
    _times[key] += duration
    _counts[key] += 1
    log("{}Finished {} [duration={:.3}s]".format(_indent(len(_task_stack)), name, duration))

@contextmanager
def task(name, **kwargs):
    task_begin(name, **kwargs)
    try:
        yield
    finally:
        task_end()

def event(name):
    log("{}{}".format(_indent(len(_task_stack)), name))

def timings():
    """Return (task path, total seconds, count) triples, slowest first."""
    return [(k, _times[k], _counts[k]) for k in sorted(_times, key=_times.get, reverse=True)]

def dump_profile(path):
    duration = (datetime.datetime.now() - _begin).total_seconds()
    with open(path, "w") as f:
        f.write("Total duration: {:.3} seconds\n\n".format(duration))
        for k, seconds, count in timings():
            f.write("{:16.3} {:6d}x {}\n".format(seconds, count, " / ".join(k)))
