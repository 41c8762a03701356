"""Preference center URLs."""

from django.urls import path

from .views import SubscribeView, UnsubscribeAllView, UnsubscribeCampaignView

urlpatterns = [
    path("subscribe/", SubscribeView.as_view(), name="subscribe"),
    path("unsubscribe-campaign/", UnsubscribeCampaignView.as_view(), name="unsubscribe-campaign"),
    path("unsubscribe-all/", UnsubscribeAllView.as_view(), name="unsubscribe-all"),
]
