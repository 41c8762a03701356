"""Email preference center for HubSpot and ReachInbox."""
