import io

from factorial_lab.adapters.stdout import StreamWriter


def test_stream_writer_appends_newline():
    stream = io.StringIO()
    writer = StreamWriter(stream)

    writer.write_line("factorial value:")
    writer.write_line("120")
    writer.flush()

    assert stream.getvalue() == "factorial value:\n120\n"


def test_stream_writer_defaults_to_stdout(capsys):
    StreamWriter().write_line("hello")
    assert capsys.readouterr().out == "hello\n"
