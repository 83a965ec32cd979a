import contextvars


class Context:
    """Who is calling. The host authenticates the sender; the ledger only reads it from here."""

    def __init__(self):
        self._caller = contextvars.ContextVar('caller', default=None)

    @property
    def caller(self):
        return self._caller.get()


class Runtime:
    # Each thread (and each nested call) sees its own caller
    def __init__(self):
        self.context = Context()

    def set_up(self, sender):
        return self.context._caller.set(sender)

    def clean_up(self, token):
        self.context._caller.reset(token)


rt = Runtime()
