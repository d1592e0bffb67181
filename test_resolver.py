"""
Tests for chain resolution and verdicts
"""
from redirect_validator.correlator import CorrelationState
from redirect_validator.evaluator import FAILURE, SUCCESS, ValidationTask, Verdict, evaluate
from redirect_validator.events import RequestSent
from redirect_validator.resolver import redirect_chain, resolve_final


def test_last_request_wins():
    state = CorrelationState(
        primary_request_id="1",
        requests=(RequestSent("1", "a.com", "/1"), RequestSent("1", "b.com", "/2")),
    )
    assert resolve_final(state) == "b.com/2"
    assert redirect_chain(state) == ["a.com/1", "b.com/2"]


def test_empty_chain_resolves_to_empty_string():
    assert resolve_final(CorrelationState()) == ""
    assert redirect_chain(CorrelationState()) == []


def test_missing_components_are_empty():
    assert resolve_final(CorrelationState(requests=(RequestSent("1", None, "/page"),))) == "/page"
    assert resolve_final(CorrelationState(requests=(RequestSent("1", "example.com", None),))) == "example.com"
    assert resolve_final(CorrelationState(requests=(RequestSent("1"),))) == ""


def test_empty_chain_is_a_failure():
    task = ValidationTask("http://short.ly/x", "https://example.com/page")
    verdict = evaluate(task, resolve_final(CorrelationState()))
    assert verdict.final_status == FAILURE
    assert verdict.final_destination_url == ""


def test_same_domain_is_success():
    task = ValidationTask("http://short.ly/x", "https://example.com/page")
    verdict = evaluate(task, "example.com/other?q=1", "1")

    assert verdict == Verdict(
        request_id="1",
        redirection_url="http://short.ly/x",
        destination_url="https://example.com/page",
        final_destination_url="example.com/other?q=1",
        final_status=SUCCESS,
    )
    assert verdict.succeeded


def test_www_on_either_side_is_ignored():
    task = ValidationTask("http://short.ly/x", "https://www.example.com/")
    assert evaluate(task, "example.com/").final_status == SUCCESS

    task = ValidationTask("http://short.ly/x", "example.com")
    assert evaluate(task, "www.example.com/page").final_status == SUCCESS


def test_other_domain_is_failure():
    task = ValidationTask("http://short.ly/x", "https://example.com/page")
    assert evaluate(task, "attacker.test/page").final_status == FAILURE


def test_subdomain_is_failure():
    task = ValidationTask("http://short.ly/x", "https://example.com/page")
    assert evaluate(task, "login.example.com/page").final_status == FAILURE


def test_domain_comparison_is_case_sensitive():
    task = ValidationTask("http://short.ly/x", "https://Example.com/page")
    assert evaluate(task, "example.com/page").final_status == FAILURE


def test_missing_request_id_is_blank():
    task = ValidationTask("http://short.ly/x", "https://example.com/page")
    assert evaluate(task, "", None).request_id == ""


def test_row_order_matches_header():
    verdict = Verdict("1", "http://short.ly/x", "https://example.com/page", "example.com/page", SUCCESS)
    assert verdict.as_row() == ["1", "http://short.ly/x", "https://example.com/page", "example.com/page", "Success"]


def test_at_sign_in_query_does_not_spoof_the_domain():
    task = ValidationTask("http://short.ly/x", "https://example.com/page")
    assert evaluate(task, "attacker.test/page?u=victim@example.com").final_status == FAILURE
    assert evaluate(task, "attacker.test/login?next=@example.com").final_status == FAILURE


def test_unresolved_url_never_matches_an_empty_destination():
    task = ValidationTask("http://x", "")
    assert evaluate(task, "").final_status == FAILURE

    task = ValidationTask("http://x", "/no/domain/here")
    assert evaluate(task, resolve_final(CorrelationState(requests=(RequestSent("1", None, "/page"),)))).final_status == FAILURE
