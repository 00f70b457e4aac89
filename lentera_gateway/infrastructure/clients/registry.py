"""Lender registry HTTP client for checking regulator registration"""

import httpx
from lentera_gateway.domain.models import LenderVerification
from lentera_gateway.domain.exceptions import RegistryAPIError
from lentera_gateway.config import settings
from lentera_gateway.infrastructure.observability.metrics import registry_latency_histogram, registry_failure_counter


class RegistryClient:
    """Client for the external lender verification service"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.registry_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def verify_lender(self, lender_name: str) -> LenderVerification:
        """
        Ask the registry whether a lender is registered with the regulator.

        Raises:
            RegistryAPIError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with registry_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}{settings.registry_verify_path}",
                        json={"lenderName": lender_name},
                    )
                response.raise_for_status()
                data = response.json()

                is_registered = data["isRegistered"]
                if not isinstance(is_registered, bool):
                    raise TypeError(f"isRegistered must be a boolean, got {is_registered!r}")

                return LenderVerification(
                    is_registered=is_registered,
                    lender_name=data.get("lenderName") or lender_name,
                    is_illegal=bool(data.get("isIllegal", False)),
                    message=data.get("message"),
                )

            except httpx.TimeoutException as e:
                registry_failure_counter.inc()
                raise RegistryAPIError(f"Registry API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                registry_failure_counter.inc()
                raise RegistryAPIError(f"Registry API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                registry_failure_counter.inc()
                raise RegistryAPIError(f"Registry API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                registry_failure_counter.inc()
                raise RegistryAPIError(f"Invalid verification data from registry: {e}") from e
