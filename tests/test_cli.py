'''
Command line tests
'''

from qcalc.cli import CLI

from pytest import raises


def run(capsys, *args):
    CLI().run(args=list(args))
    return capsys.readouterr()


def test_expression(capsys):
    assert run(capsys, '-e', '5 + 3 =').out == '8\n'


def test_one_result_per_line(capsys):
    assert run(capsys, '-e', '5 + 3 =', '× 2 =').out == '8\n16\n'


def test_places(capsys):
    assert run(capsys, '-k', '2', '-e', '1 / 3 =').out == '0.33\n'


def test_grouping(capsys):
    assert run(capsys, '-g', '3', '-e', '1234567').out == '1,234,567\n'


def test_radix(capsys):
    assert run(capsys, '-r', 'hex', '-e', 'FF + 1 =').out == '100\n'


def test_error_reported(capsys):
    captured = run(capsys, '-e', '1 / 0 =')
    assert captured.err == 'Cannot divide by zero\n'
    assert captured.out == '0\n'


def test_lex_error_reported(capsys):
    captured = run(capsys, '-e', '2 + foo')
    assert captured.err == "Couldn't lex foo\n"
    assert captured.out == '2\n'


def test_bad_precision(capsys):
    with raises(SystemExit) as excinfo:
        run(capsys, '--precision', '0', '-e', '1')
    assert excinfo.value.code == 2


def test_history(capsys):
    captured = run(capsys, '-H', '-e', '5 + 3 =', '9 sqrt')
    assert captured.out.splitlines() == ['8', '3', '1\t5 + 3 = 8',
                                         '2\t√(9) = 3']


def test_units(capsys):
    lines = run(capsys, '-U', '-e').out.splitlines()
    assert 'length\tkm\tKilometer' in lines
    assert 'temperature\tK\tKelvin' in lines


def test_convert(capsys):
    captured = run(capsys, '-c', 'length', 'km', 'm', '-e', '1', '2.5')
    assert captured.out == '1000\n2500\n'


def test_convert_error(capsys):
    captured = run(capsys, '-c', 'length', 'km', 'furlong', '-e', '1')
    assert captured.err == 'No such unit length.furlong\n'


def test_raw_grammar(capsys):
    assert '(?<number>' in run(capsys, '-G', '-e').out


def test_dump(capsys):
    lines = run(capsys, '-D', '-e', '5 +').out.splitlines()
    assert lines == ['[groups]\t<repr(lexeme)>\t<immediate>',
                     "number\t'5'\tFalse",
                     "space\t' '\tTrue",
                     "operator\t'+'\tTrue"]
