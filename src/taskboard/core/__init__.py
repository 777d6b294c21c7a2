"""Taskboard Core -- 领域模型、SQLite 持久化与传输编解码"""
