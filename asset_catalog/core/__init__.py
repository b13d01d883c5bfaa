"""
Core catalog logic.

This module is framework-agnostic - it doesn't import FastAPI, httpx,
or any infrastructure concerns. The aggregator only sees a ListingClient
protocol, so it can be tested against an in-memory listing.
"""
