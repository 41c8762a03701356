"""Preference center tasks module."""

from celery import shared_task

from mailprefs import services
from mailprefs.providers import providers


@shared_task
def subscribe(email: str):
    """Re-subscribe a recipient."""
    preference = services.PreferenceRequest(email=email)
    return services.subscribe(preference, providers.hubspot).as_dict()


@shared_task
def unsubscribe_campaign(
    email: str,
    campaign: str = services.DEFAULT_CAMPAIGN,
    campaign_id: str = "",
    source: str | None = None,
):
    """Unsubscribe a recipient from a single campaign."""
    preference = services.PreferenceRequest(
        email=email,
        campaign=campaign,
        campaign_id=campaign_id,
        source=services.Source.parse(source),
    )
    return services.unsubscribe_campaign(preference, providers.hubspot, providers.reachinbox).as_dict()


@shared_task
def unsubscribe_all(email: str):
    """Unsubscribe a recipient from all communications."""
    preference = services.PreferenceRequest(email=email)
    return services.unsubscribe_all(preference, providers.hubspot, providers.reachinbox).as_dict()
