"""Persistence layer for save slots"""
