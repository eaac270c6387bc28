# engine/hooks.py


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def regenerate(self, **_):
        pass

    def load(self, **_):
        pass

    def error(self, *_, **__):
        pass
