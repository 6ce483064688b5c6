"""Envelope encoding and decoding helpers"""
