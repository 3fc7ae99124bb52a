"""
Tests for the hsts_policy management command
"""

import json
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from hsts_filter.exceptions import ConfigPersistenceError
from hsts_filter.models import HstsPolicyRecord
from hsts_filter.policy import Policy
from hsts_filter.registry import get_policy_store


def run(*args):
    out, err = StringIO(), StringIO()
    call_command("hsts_policy", *args, stdout=out, stderr=err)
    return out.getvalue(), err.getvalue()


@pytest.mark.django_db
class TestHstsPolicyCommand:
    """Test showing and changing the policy from the command line"""

    def test_show_defaults(self):
        out, _ = run()
        assert "HSTS Filter" in out
        assert "Strict-Transport-Security: max-age=31536000; includeSubDomains" in out

    def test_show_json(self):
        out, _ = run("--json")
        assert json.loads(out) == {
            "includeSubDomains": True,
            "maxAge": "31536000",
            "sendHeader": True,
        }

    def test_change_keeps_unspecified_fields(self):
        out, _ = run("--max-age", "600")

        assert "HSTS policy updated." in out
        assert get_policy_store().current() == Policy(True, 600, True)
        assert HstsPolicyRecord.objects.get().max_age == "600"

    def test_disable_subdomains_and_header(self):
        out, _ = run("--no-include-subdomains", "--no-send-header")

        assert get_policy_store().current() == Policy(False, 31536000, False)
        assert "(not sent)" in out

    def test_invalid_max_age(self):
        with pytest.raises(CommandError, match="maxAge"):
            run("--max-age", "soon")
        assert get_policy_store().current() == Policy.default()

    def test_persistence_failure_warns(self, monkeypatch):
        def fail(document):
            raise ConfigPersistenceError("database is read-only")

        monkeypatch.setattr(get_policy_store().backend, "write", fail)

        out, err = run("--max-age", "120")

        assert "not saved" in err
        assert "max-age=120" in out
