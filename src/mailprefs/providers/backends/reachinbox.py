"""ReachInbox cold email integration."""

import logging

from mailprefs.providers.backends import ProviderOutcome
from mailprefs.providers.exceptions import ProviderError

from .base import BaseBackend

logger = logging.getLogger(__name__)

UNSUBSCRIBED_LEAD_STATUS = "Unsubscribed"


class ReachInboxBackend(BaseBackend):
    """
    ReachInbox cold email integration.

    Handles:
    - Permanent send blocklist
    - Lead status of a contact inside a campaign
    """

    provider = "reachinbox"
    display_name = "ReachInbox"
    default_base_url = "https://api.reachinbox.ai"

    def add_to_blocklist(self, email: str) -> ProviderOutcome:
        """Add an address to the blocklist so no campaign ever emails it again."""
        if not self.is_configured:
            return self.not_configured()

        response = self._request("POST", "/api/v1/blocklist/add", json={"emails": [email]})
        self._check(response, "blocklist")

        payload = self._json(response)
        payload.pop("success", None)
        payload.pop("provider", None)

        logger.info("[ReachInbox] Successfully added to blocklist: %s", email)
        return ProviderOutcome.ok(self.provider, message=payload.pop("message", None), **payload)

    def find_lead(self, campaign_id: str, email: str) -> dict | None:
        """Retrieve the lead of a campaign matching the email, case-insensitively."""
        response = self._request("GET", "/api/v1/leads", params={"campaignId": campaign_id, "email": email})
        self._check(response, "lead lookup")

        wanted = email.strip().lower()
        for lead in self._json(response).get("data") or []:
            if str(lead.get("email") or "").strip().lower() == wanted:
                return lead
        return None

    def set_lead_status(self, campaign_id: str, lead_id, status: str = UNSUBSCRIBED_LEAD_STATUS) -> None:
        """Update the status of a lead inside a campaign."""
        response = self._request(
            "POST",
            "/api/v1/leads",
            json={"campaignId": campaign_id, "leadId": lead_id, "leadStatus": status},
        )
        self._check(response, "lead status update")

    def unsubscribe_lead(self, campaign_id: str, email: str) -> ProviderOutcome:
        """Mark the lead matching the email as unsubscribed in the campaign."""
        lead = self.find_lead(campaign_id, email)
        if lead is None:
            logger.info("[ReachInbox] Lead %s not found in campaign %s", email, campaign_id)
            return ProviderOutcome.ok(self.provider, message="Lead not found")

        self.set_lead_status(campaign_id, lead["id"])
        logger.info("[ReachInbox] Lead %s unsubscribed from campaign %s", email, campaign_id)
        return ProviderOutcome.ok(self.provider, leadId=lead["id"])

    def unsubscribe(self, email: str, campaign_id: str = "", campaign_name: str = "") -> ProviderOutcome:
        """
        Block the address and, when the campaign is known, mark its lead unsubscribed.

        ReachInbox campaigns are identified by id only, the campaign name is ignored.
        """
        if not self.is_configured:
            return self.not_configured()

        outcome = self.add_to_blocklist(email)
        if campaign_id:
            try:
                lead_outcome = self.unsubscribe_lead(campaign_id, email)
            except ProviderError as err:
                logger.warning("[ReachInbox] Lead status of %s not updated: %s", email, err)
                lead_outcome = ProviderOutcome.failed(self.provider, str(err))
            outcome.extra["lead"] = lead_outcome.as_dict()
        return outcome

    def unsubscribe_all(self, email: str) -> ProviderOutcome:
        """Stop every email to the address by adding it to the blocklist."""
        return self.add_to_blocklist(email)
