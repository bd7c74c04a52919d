"""Capturability classification and evolution-demand planning for a regional Pokédex."""
