from .gem import Gem


class RecordAccumulator:
    """
    Collects gem records in document order.

    A record is finalized only when the next record boundary is seen, and
    only if it has a name by then. Finalized gems are keyed by name, so a
    later gem with the same name replaces the earlier one (keeping its own,
    later position).
    """

    def __init__(self, finalize_trailing=False):
        self.finalize_trailing = finalize_trailing
        self.gems = {}
        self.current = Gem()
        self._next_position = 1

    def _finalize_current(self):
        if not self.current.name:
            return
        self.current.position = self._next_position
        self.gems[self.current.name] = self.current
        self._next_position += 1

    def begin_record(self):
        self._finalize_current()
        self.current = Gem()

    def set_field(self, field, value):
        setattr(self.current, field, value)

    def finish(self):
        """Return the finalized gems; the in-progress record is dropped unless finalize_trailing is set."""
        if self.finalize_trailing:
            self._finalize_current()
            self.current = Gem()
        return self.gems
