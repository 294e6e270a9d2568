""" STEP RECORDER

Side channel for visualisation and debugging. The hull algorithms accept an
optional recorder and push one step (a list of events) at each point where
progress is worth showing. Recording never changes the hull that is returned.
"""
from collections import namedtuple


HullEdge = namedtuple('HullEdge', ['start', 'end'])
TemporaryEdge = namedtuple('TemporaryEdge', ['start', 'end'])
VerticalLine = namedtuple('VerticalLine', ['x'])
Comment = namedtuple('Comment', ['text'])


class StepRecorder(object):
    #
    # PUBLIC METHODS
    #
    def __init__(self):
        self.history = []


    def record(self, *events):
        if events:
            self.history.append(list(events))


    def mirrored(self):
        """ view for algorithms working on y-negated points
        """
        return _MirroredRecorder(self)


    def events(self, kind=None):
        """ flattened history, optionally filtered by event type
        """
        return [
            e for step in self.history for e in step
            if kind is None or isinstance(e, kind)]


    def comments(self):
        return [e.text for e in self.events(Comment)]


    def hull_edges(self):
        return [(e.start, e.end) for e in self.events(HullEdge)]


    def __len__(self):
        return len(self.history)


    def __iter__(self):
        return iter(self.history)


class _MirroredRecorder(object):

    def __init__(self, target):
        self.target = target


    def record(self, *events):
        self.target.record(*[_mirror(e) for e in events])


    def mirrored(self):
        return self.target


def _mirror(event):
    if isinstance(event, (HullEdge, TemporaryEdge)):
        return type(event)(event.start.mirrored(), event.end.mirrored())
    return event
