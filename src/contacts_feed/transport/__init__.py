"""Transports for reaching the contacts feed and token endpoints."""

from contacts_feed.transport.base import BaseFeedTransport
from contacts_feed.transport.http import HttpFeedTransport

__all__ = ["BaseFeedTransport", "HttpFeedTransport"]
