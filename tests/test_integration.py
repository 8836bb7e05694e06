"""
Integration tests for ToyRSA.

Tests end-to-end sessions and the command line.
"""

import logging
import random

import pytest
from toyrsa.config import PrimeRange, MAX_MESSAGE_LENGTH
from toyrsa.core_crypto.keygen import SizeError
from toyrsa.main import main
from toyrsa.session import (
    SessionResult, read_message, run_session, ascii_values, format_report
)


class TestReadMessage:
    """Tests for turning input lines into plaintext."""
    
    def test_strips_newline(self):
        """Trailing line terminator is dropped."""
        assert read_message("Hello\n") == b"Hello"
        assert read_message("Hello\r\n") == b"Hello"
    
    def test_keeps_inner_spaces(self):
        """Only the terminator is stripped."""
        assert read_message("  a b  \n") == b"  a b  "
    
    def test_truncates(self):
        """At most MAX_MESSAGE_LENGTH - 1 bytes are kept."""
        message = read_message("x" * 500)
        assert len(message) == MAX_MESSAGE_LENGTH - 1
    
    def test_empty_line(self):
        """Empty line gives empty plaintext."""
        assert read_message("\n") == b""
    
    def test_cuts_at_first_newline(self):
        """Text after the first newline is dropped."""
        assert read_message("first\nsecond\n") == b"first"
        assert read_message("first\r\nsecond") == b"first"
        assert read_message("\nhidden") == b""


class TestSession:
    """End-to-end session tests."""
    
    def test_round_trip(self, sequence_rng):
        """Full session recovers the message."""
        result = run_session(b"Hello", rng=sequence_rng([101, 103]))
        assert isinstance(result, SessionResult)
        assert result.recovered == b"Hello"
        assert result.round_trip_ok
        assert len(result.ciphertext) == 5
        assert result.public_key.n == 10403
    
    def test_empty_message(self):
        """Empty message encrypts to nothing and decrypts to nothing."""
        result = run_session(b"", rng=random.Random(3))
        assert result.ciphertext == []
        assert result.recovered == b""
        assert result.round_trip_ok
    
    def test_size_error_propagates(self):
        """Too small a range aborts the session."""
        with pytest.raises(SizeError):
            run_session(b"Hi", PrimeRange(2, 10), random.Random(0))
    
    def test_size_error_logged(self, caplog):
        """SizeError is logged as a warning."""
        with caplog.at_level(logging.WARNING, logger="toyrsa"):
            with pytest.raises(SizeError):
                run_session(b"Hi", PrimeRange(2, 10), random.Random(0))
        assert any("too small" in r.getMessage() for r in caplog.records)
    
    def test_private_exponent_not_logged(self, sequence_rng, caplog):
        """Debug logging does not reveal d or the primes."""
        with caplog.at_level(logging.DEBUG, logger="toyrsa"):
            run_session(b"Hi", rng=sequence_rng([101, 103]))
        text = " ".join(r.getMessage() for r in caplog.records)
        assert "8743" not in text
        assert "101" not in text
        assert "10403" in text


class TestReport:
    """Tests for report rendering."""
    
    def test_ascii_values(self):
        """Byte values are space separated."""
        assert ascii_values(b"Hi!") == "72 105 33"
        assert ascii_values(b"") == ""
    
    def test_format_report(self, sequence_rng):
        """Report lists keys, message and values."""
        result = run_session(b"Hi", rng=sequence_rng([101, 103]))
        report = format_report(result)
        assert "Public Key (e, n): (7, 10403)" in report
        assert "Private Key (d, n): (8743, 10403)" in report
        assert "Original Message: Hi" in report
        assert "Decrypted Message: Hi" in report
        assert "ASCII values: 72 105" in report
        encrypted = " ".join(str(c) for c in result.ciphertext)
        assert f"Encrypted Values: {encrypted}" in report
    
    def test_report_hides_primes(self, sequence_rng):
        """p, q and phi are never rendered."""
        report = format_report(run_session(b"Hi", rng=sequence_rng([101, 103])))
        assert "phi" not in report
        assert "10200" not in report


class TestCommandLine:
    """Tests for the command line entry point."""
    
    def test_message_option(self, capsys):
        """-m encrypts and prints the report."""
        assert main(["-m", "Hello", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Original Message: Hello" in out
        assert "Decrypted Message: Hello" in out
    
    def test_reads_stdin(self, monkeypatch, capsys):
        """Without -m the message is read from input()."""
        prompts = []
        
        def fake_input(prompt):
            prompts.append(prompt)
            return "From stdin\n"
        
        monkeypatch.setattr("builtins.input", fake_input)
        assert main(["--seed", "5"]) == 0
        assert prompts == [f"Enter a message (max {MAX_MESSAGE_LENGTH} chars): "]
        assert "Decrypted Message: From stdin" in capsys.readouterr().out
    
    def test_small_range_fails(self, capsys):
        """Range [2, 10] exits with status 1 and explains why."""
        assert main(["-m", "Hi", "--low", "2", "--high", "10", "--seed", "0"]) == 1
        out = capsys.readouterr().out
        assert "too small" in out
        assert "Generated primes p = " in out
    
    def test_range_without_primes_fails(self, capsys):
        """A range with fewer than two primes is reported."""
        assert main(["-m", "Hi", "--low", "24", "--high", "28"]) == 1
        assert "at least two primes" in capsys.readouterr().out
    
    def test_inverted_range(self):
        """low > high is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["-m", "Hi", "--low", "500", "--high", "100"])
        assert exc_info.value.code == 2
    
    def test_closed_stdin(self, monkeypatch, capsys):
        """End of input exits with status 1 instead of a traceback."""
        def closed_input(prompt):
            raise EOFError
        
        monkeypatch.setattr("builtins.input", closed_input)
        assert main(["--seed", "5"]) == 1
        assert "no message read" in capsys.readouterr().out
    
    def test_multiline_message_option(self, capsys):
        """-m keeps only the first line."""
        assert main(["-m", "top\nbottom", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "Decrypted Message: top\n" in out
        assert "bottom" not in out
    
    def test_seed_reproducible(self, capsys):
        """Same seed prints the same report."""
        main(["-m", "abc", "--seed", "42"])
        first = capsys.readouterr().out
        main(["-m", "abc", "--seed", "42"])
        second = capsys.readouterr().out
        assert first == second
