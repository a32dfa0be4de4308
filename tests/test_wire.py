import pytest

from playkit.wire import Client


class FakeStream:
    def __init__(self):
        self.data = b""
        self.flushes = 0

    def write(self, b):
        self.data += b
        return len(b)

    def flush(self):
        self.flushes += 1


class BrokenStream:
    def write(self, b):
        raise OSError("broken pipe")


def test_set():
    s = FakeStream()
    Client(s).set("key", "value")
    assert s.data == b"setkeyvalue\r\n"
    assert s.flushes == 1


def test_execute_with_string_and_bytes():
    s = FakeStream()
    Client(s).execute("set", "key", b"value")
    assert s.data == b"setkeyvalue\r\n"


def test_command_with_args():
    s = FakeStream()
    Client(s).command("set").arg("key").arg(b"value").send()
    assert s.data == b"setkeyvalue\r\n"


def test_kv_chain():
    s = FakeStream()
    Client(s).command("set").kv("key", b"value").kv("key", b"value").send()
    assert s.data == b"set key value key value\r\n"


def test_repeated_commands_accumulate():
    s = FakeStream()
    c = Client(s)
    c.set("key", "value")
    c.set("key", "value")
    assert s.data == b"setkeyvalue\r\n" * 2
    assert s.flushes == 2


def test_write_error_propagates():
    with pytest.raises(OSError):
        Client(BrokenStream()).set("key", "value")


def test_bad_argument_type():
    with pytest.raises(TypeError):
        Client(FakeStream()).execute("set", 5)