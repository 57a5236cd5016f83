from pathlib import Path


class FakeRunner:
    """Records commands instead of running them.

    retcodes maps (tool, first arg) e.g. ('make', 'test') to a retcode,
    make_binary makes `make coredns` leave a coredns file in its cwd.
    """

    def __init__(self, retcodes=None, make_binary=False):
        self.calls = []
        self.retcodes = retcodes or {}
        self.make_binary = make_binary

    def run(self, cmd, cwd=None, capture=False):  # pylint: disable=unused-argument
        self.calls.append((list(cmd), cwd))
        ret = self.retcodes.get(tuple(cmd[:2]), 0)
        if ret == 0 and self.make_binary and cmd[:2] == ['make', 'coredns']:
            Path(cwd, 'coredns').write_bytes(b'\x7fELF coredns')
        return ret, ''

    def commands(self):
        return [c for c, _ in self.calls]
