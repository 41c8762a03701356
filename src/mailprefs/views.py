"""Preference center API views."""

import json
import logging

from django.http import HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from mailprefs import services
from mailprefs.providers import providers
from mailprefs.providers.exceptions import ProviderError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@method_decorator(csrf_exempt, name="dispatch")
class PreferenceActionView(View):
    """
    Base view of the preference center actions.

    The static preference page may be served from another origin, every
    response therefore carries permissive CORS headers and preflight requests
    are answered with an empty 204.

    Subclasses implement `perform` which receives the validated request.
    """

    http_method_names = ["post", "options"]
    error_message = "Failed to process unsubscription"

    def dispatch(self, request, *args, **kwargs):
        """Add the CORS headers to every response."""
        response = super().dispatch(request, *args, **kwargs)
        for header, value in CORS_HEADERS.items():
            response[header] = value
        return response

    def options(self, request, *args, **kwargs):
        """Answer the CORS preflight."""
        return HttpResponse(status=204)

    def http_method_not_allowed(self, request, *args, **kwargs):
        """Only POST carries an action."""
        logger.warning("Method Not Allowed (%s): %s", request.method, request.path)
        return JsonResponse({"error": "Method not allowed"}, status=405)

    def post(self, request, *args, **kwargs):
        """Validate the request, run the action and serialize its result."""
        try:
            preference = services.PreferenceRequest.from_payload(json.loads(request.body or b"null"))
        except ValueError:
            return JsonResponse({"error": "Email is required"}, status=400)

        try:
            result = self.perform(preference)
        except ProviderError as err:
            logger.error("[%s] Error: %s", self.__class__.__name__, err)
            return JsonResponse({"error": self.error_message, "details": str(err)}, status=500)
        except Exception as err:
            logger.exception("[%s] Unexpected error: %s", self.__class__.__name__, err)
            return JsonResponse({"error": self.error_message, "details": str(err)}, status=500)

        return JsonResponse(result.as_dict())

    def perform(self, preference):
        """Run the action, return an AggregateResult."""
        raise NotImplementedError


class SubscribeView(PreferenceActionView):
    """Re-subscribe a recipient to email communications."""

    error_message = "Failed to process subscription"

    def perform(self, preference):
        """Subscribe on HubSpot."""
        return services.subscribe(preference, providers.hubspot)


class UnsubscribeCampaignView(PreferenceActionView):
    """Unsubscribe a recipient from a single campaign."""

    def perform(self, preference):
        """Unsubscribe on the provider the campaign comes from."""
        return services.unsubscribe_campaign(preference, providers.hubspot, providers.reachinbox)


class UnsubscribeAllView(PreferenceActionView):
    """Unsubscribe a recipient from all communications."""

    def perform(self, preference):
        """Unsubscribe on every provider."""
        return services.unsubscribe_all(preference, providers.hubspot, providers.reachinbox)
