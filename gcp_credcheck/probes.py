# gcp_credcheck/probes.py
import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

PROBE_ATTEMPTS = 5

SUCCESS_MARKER = "✅"
FAILURE_MARKER = "‼️ "


@dataclass
class ProbeResult:
    name: str
    attempts: int
    successes: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_probe(name: str, call: Callable[[], object], attempts: int = PROBE_ATTEMPTS,
              on_success: Optional[Callable[[], None]] = None) -> ProbeResult:
    """
    Call ``call`` up to ``attempts`` times, stopping at the first exception.

    The exception is kept on the result rather than raised.
    """
    result = ProbeResult(name=name, attempts=attempts)
    for _ in range(attempts):
        try:
            call()
        except Exception as e:
            logger.debug(f"Probe {name} failed after {result.successes} successes: {str(e)}")
            result.error = e
            break
        result.successes += 1
        if on_success:
            on_success()
    return result


def probe_billing(config):
    return config.client_billing.billingAccounts().list().execute()


def probe_organizations(config):
    return config.client_resource_manager.organizations().search(body={}).execute()


# (label, error prefix, call)
SMOKE_TESTS = [
    ("billing", "Error listing cloud billing accounts", probe_billing),
    ("org", "Error listing organizations", probe_organizations),
]


def run_smoke_tests(config, out=None) -> List[ProbeResult]:
    """Run every probe against ``config`` and print a marker per successful call."""
    out = out or sys.stdout
    results = []

    for label, error_prefix, call in SMOKE_TESTS:
        out.write(f"Trying {label} API... ")
        out.flush()

        result = run_probe(
            label,
            lambda: call(config),
            on_success=lambda: (out.write(SUCCESS_MARKER), out.flush()),
        )
        if result.error is not None:
            out.write(f"{FAILURE_MARKER} {error_prefix}: {str(result.error)}")
        out.write("\n")
        results.append(result)

    return results
