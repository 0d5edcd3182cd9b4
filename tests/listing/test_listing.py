import pytest

import stackvm.common.instruction as i
from stackvm.common.programs import FIBONACCI, COUNTDOWN
import stackvm.listing.reader as reader
from stackvm.listing.reader import ListingError

from unit_utils import find_file


def test_fibonacci_file():
    program = reader.read_file(find_file('testdata/listing/fibonacci.svm'))

    assert program == list(FIBONACCI)


def test_label_on_own_line():
    program = reader.read_file(str(find_file('testdata/listing/countdown.svm')))

    assert program == list(COUNTDOWN)


def test_all_mnemonics():
    text = '\n'.join([
        'push -3', 'pop', 'dup 0', 'plus', 'minus', 'mult',
        'div', 'jmp 1', 'jnz +2', 'jeq 0', 'hlt'
    ])

    assert reader.read_text(text) == [
        i.push(-3), i.pop(), i.dup(0), i.plus(), i.minus(), i.mult(),
        i.div(), i.jmp(1), i.jnz(2), i.jeq(0), i.hlt()
    ]


def test_blank_lines_and_comments():
    text = '\n// header\n\n   hlt   // stop\n'

    assert reader.read_text(text) == [i.hlt()]


def test_label_at_end():
    program = reader.read_text('jmp done\ndone:')

    assert program == [i.jmp(1)]


def test_forward_reference():
    program = reader.read_text('jmp skip\npush 1\nskip: hlt')

    assert program == [i.jmp(2), i.push(1), i.hlt()]


@pytest.mark.parametrize('text, message', [
    ('nop', 'line 1: cannot parse'),
    ('hlt\npush', 'line 2: cannot parse'),
    ('pop 3', 'line 1: cannot parse'),
    ('pushx 3', 'line 1: cannot parse'),
    ('jmp nowhere', 'line 1: undefined label nowhere'),
    ('a: hlt\na: hlt', 'line 2: duplicate label a'),
    ('push 2147483648', 'line 1: Word value must be'),
])
def test_errors(text, message):
    with pytest.raises(ListingError, match=message):
        reader.read_text(text)


def test_listing_error_is_value_error():
    assert issubclass(ListingError, ValueError)


def test_unreadable_files(tmp_path):
    with pytest.raises(ListingError, match='cannot read'):
        reader.read_file(tmp_path / 'absent.svm')

    binary = tmp_path / 'binary.svm'
    binary.write_bytes(b'\xff\xfe\x00')

    with pytest.raises(ListingError, match='cannot read'):
        reader.read_file(binary)
