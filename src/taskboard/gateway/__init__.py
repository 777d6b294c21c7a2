"""Taskboard Gateway -- FastAPI RPC 边界"""
