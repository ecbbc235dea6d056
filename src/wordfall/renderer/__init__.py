"""Renderer subsystem — lane and HUD drawing from engine snapshots."""
