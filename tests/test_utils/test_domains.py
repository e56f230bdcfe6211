"""Tests for domain validation."""

import pytest

from nimbus.utils.domains import has_public_suffix, is_valid_syntax, public_suffix


class TestDomainSyntax:
    """Test syntax checks."""

    @pytest.mark.parametrize("domain", ["example.com", "a.b.example.co.uk", "xn--bcher-kva.example", "example.com."])
    def test_valid(self, domain):
        """Test well formed names."""
        assert is_valid_syntax(domain)

    @pytest.mark.parametrize("domain", ["", "192.168.1.1", "bad_label.com", "-a.com", "a-.com", "a..com", "a" * 64 + ".com"])
    def test_invalid(self, domain):
        """Test malformed names."""
        assert not is_valid_syntax(domain)


class TestPublicSuffix:
    """Test public suffix lookups."""

    def test_suffixes(self):
        """Test suffix extraction for common names."""
        assert public_suffix("example.com") == "com"
        assert public_suffix("sub.example.co.uk") == "co.uk"
        assert public_suffix("localhost") == ""

    def test_has_public_suffix(self):
        """Test the combined check."""
        assert has_public_suffix("example.com")
        assert has_public_suffix("WWW.Example.ORG")
        assert not has_public_suffix("localhost")
        assert not has_public_suffix("127.0.0.1")
