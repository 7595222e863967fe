"""Footle - daily guess-the-footballer game backend."""
