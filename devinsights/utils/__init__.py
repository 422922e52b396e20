"""Shared helpers: date parsing, value formatting, structured error logging"""
