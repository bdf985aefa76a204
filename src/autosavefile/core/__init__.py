"""Core decision logic for AutoSaveFile.

Core holds the save-decision engine, pattern matching and the port
definitions, with no knowledge of any host editor runtime.
"""
