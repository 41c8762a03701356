"""HubSpot communication preferences integration."""

import json
import logging
from urllib.parse import quote

from mailprefs.providers.backends import ProviderOutcome, SubscriptionDefinition

from .base import BaseBackend

logger = logging.getLogger(__name__)

LEGAL_BASIS = "CONSENT_WITH_NOTICE"
EMAIL_CHANNEL = "EMAIL"
# Error categories HubSpot uses for contacts that opted out of all email.
HARD_OPT_OUT_CATEGORIES = ("OPTED_OUT", "OPT_OUT")


def is_hard_opt_out_error(body: str | None) -> bool:
    """
    Tell whether a failed v3 subscribe was caused by a previous hard opt-out.

    HubSpot answers 400 both for invalid requests and for contacts who opted out
    of all email. Only the latter can be fixed through the v4 subscribe endpoint.
    The structured error category is checked first, then the message text.
    """
    if not body:
        return False
    try:
        payload = json.loads(body)
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        reason = " ".join(str(payload.get(key) or "") for key in ("category", "subCategory")).upper()
        if any(category in reason for category in HARD_OPT_OUT_CATEGORIES):
            return True

    return "opted out" in body.lower()


def match_definition(definitions: list[SubscriptionDefinition], campaign_name: str) -> SubscriptionDefinition | None:
    """Find the definition whose name contains the campaign name, or the other way round."""
    needle = campaign_name.strip().lower()
    if not needle:
        return None
    for definition in definitions:
        name = definition.name.lower()
        if name and (needle in name or name in needle):
            return definition
    return None


class HubSpotBackend(BaseBackend):
    """
    HubSpot communication preferences integration.

    Handles:
    - Subscription definitions lookup
    - Subscribe and unsubscribe from a single definition (v3 API)
    - Re-subscription of opted out contacts and global opt-out (v4 API)
    """

    provider = "hubspot"
    display_name = "HubSpot"
    default_base_url = "https://api.hubapi.com"

    def __init__(self, api_key: str | None = None, subscription_id: str | None = None, **kwargs):
        """Configure the HubSpot backend."""
        super().__init__(api_key=api_key, **kwargs)
        # "default" is accepted for compatibility with HUBSPOT_SUBSCRIPTION_ID=default deployments.
        self.subscription_id = subscription_id if subscription_id not in (None, "", "default") else None

    def list_definitions(self) -> list[SubscriptionDefinition]:
        """Retrieve the subscription definitions of the HubSpot portal."""
        response = self._request("GET", "/communication-preferences/v3/definitions")
        self._check(response, "definitions lookup")
        payload = self._json(response)
        definitions = [SubscriptionDefinition.from_api(item) for item in payload.get("subscriptionDefinitions") or []]
        logger.debug("[HubSpot] Available subscription types: %s", [(d.id, d.name) for d in definitions])
        return definitions

    def default_definition(self, definitions: list[SubscriptionDefinition]) -> SubscriptionDefinition | None:
        """Select the configured definition, or the first one returned by HubSpot."""
        if self.subscription_id:
            return next((d for d in definitions if d.id == self.subscription_id), None)
        return definitions[0] if definitions else None

    def subscribe(self, email: str) -> ProviderOutcome:
        """
        Subscribe a contact to the configured subscription definition.

        Contacts who previously opted out of all email are rejected by the v3 API,
        they are re-subscribed through the v4 API instead.

        Raises:
            ProviderRequestError: If HubSpot rejects the subscription

        """
        if not self.is_configured:
            return self.not_configured()

        definition = self.default_definition(self.list_definitions())
        if definition is None:
            logger.warning("[HubSpot] No subscription type found")
            return ProviderOutcome.soft_failure(self.provider, "No subscription type configured")

        response = self._request(
            "POST",
            "/communication-preferences/v3/subscribe",
            json={
                "emailAddress": email,
                "subscriptionId": definition.id,
                "legalBasis": LEGAL_BASIS,
                "legalBasisExplanation": "User opted in via email preference center",
            },
        )
        if response.status_code == 400 and is_hard_opt_out_error(response.text):  # noqa: PLR2004
            logger.info("[HubSpot] %s opted out previously, re-subscribing with v4 API", email)
            return self.resubscribe(email, definition.id)
        self._check(response, "subscribe")

        logger.info("[HubSpot] Successfully subscribed: %s", email)
        return ProviderOutcome.ok(self.provider, subscriptionId=definition.id)

    def resubscribe(self, email: str, subscription_id: str) -> ProviderOutcome:
        """Re-subscribe a contact in hard opt-out state using the v4 API."""
        response = self._request(
            "POST",
            f"/communication-preferences/v4/statuses/{quote(email, safe='')}/subscribe",
            json={
                "subscriptionId": subscription_id,
                "channel": EMAIL_CHANNEL,
                "legalBasis": LEGAL_BASIS,
                "legalBasisExplanation": "User re-subscribed via email preference center",
            },
        )
        self._check(response, "v4 re-subscribe")

        logger.info("[HubSpot] Successfully re-subscribed: %s", email)
        return ProviderOutcome.ok(self.provider, subscriptionId=subscription_id, resubscribed=True)

    def unsubscribe(self, email: str, campaign_id: str = "", campaign_name: str = "") -> ProviderOutcome:
        """
        Unsubscribe a contact from one subscription definition.

        The definition is the given campaign id, else the definition matching the
        campaign name, else the default definition. An unknown campaign name is
        not an error: there is nothing to unsubscribe from.
        """
        if not self.is_configured:
            return self.not_configured()

        subscription_id = campaign_id
        if not subscription_id:
            definitions = self.list_definitions()
            if campaign_name:
                definition = match_definition(definitions, campaign_name)
                if definition is None:
                    logger.info("[HubSpot] Campaign %r not found, no action taken", campaign_name)
                    return ProviderOutcome.ok(self.provider, message="Campaign not found, no action taken")
            else:
                definition = self.default_definition(definitions)
            subscription_id = definition.id if definition else None

        if not subscription_id:
            logger.warning("[HubSpot] No subscription ID found")
            return ProviderOutcome.soft_failure(self.provider, "No subscription ID found")

        response = self._request(
            "POST",
            "/communication-preferences/v3/unsubscribe",
            json={
                "emailAddress": email,
                "subscriptionId": subscription_id,
                "legalBasis": LEGAL_BASIS,
                "legalBasisExplanation": "User opted out via email preference center",
            },
        )
        self._check(response, "unsubscribe")

        logger.info("[HubSpot] Successfully unsubscribed %s from %s", email, subscription_id)
        return ProviderOutcome.ok(self.provider, subscriptionId=subscription_id)

    def unsubscribe_all(self, email: str) -> ProviderOutcome:
        """Unsubscribe a contact from every email subscription, unknown contacts are ignored."""
        if not self.is_configured:
            return self.not_configured()

        response = self._request(
            "POST",
            f"/communication-preferences/v4/statuses/{quote(email, safe='')}/unsubscribe-all",
            json={"channel": EMAIL_CHANNEL},
        )
        if response.status_code == 404:  # noqa: PLR2004
            logger.info("[HubSpot] Contact not found, no action needed: %s", email)
            return ProviderOutcome.ok(self.provider, message="Contact not found in HubSpot")
        self._check(response, "unsubscribe-all")

        logger.info("[HubSpot] Successfully unsubscribed from all emails: %s", email)
        return ProviderOutcome.ok(self.provider)
