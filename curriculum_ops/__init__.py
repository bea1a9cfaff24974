"""Curriculum operations backend: provider updates in, reviewed impact reports and courses out."""
