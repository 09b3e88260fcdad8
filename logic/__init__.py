"""Scoring, composition and ranking logic for outfit recommendations."""
