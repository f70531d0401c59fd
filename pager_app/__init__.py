"""Reflex numbered pagination control"""
