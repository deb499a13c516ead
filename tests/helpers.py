"""Shared test helpers for SimpleTimer."""


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Callable wall clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class FakeNotifier:
    """Records alert/dialog requests instead of making noise."""

    def __init__(self):
        self.alerts = 0
        self.dialogs: list[str] = []

    def play_alert(self) -> None:
        self.alerts += 1

    def show_expiry_dialog(self, label: str) -> None:
        self.dialogs.append(label)
