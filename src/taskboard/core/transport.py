"""RPC 传输编解码 -- 保留富类型的 JSON 信封

响应体统一为:

    {"json": <普通 JSON>, "meta": {"values": {"0.created_at": "Date", ...}}}

datetime 写成 ISO-8601 字符串，同时把其路径记录到 meta.values，
解码端据此还原为真正的 datetime，客户端无需再自行解析时间字段。
路径由 key / 列表下标以 "." 连接，key 中的字面 "." 转义为 "\\."。
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

DATE_TAG = "Date"


def _escape(key: str) -> str:
    return key.replace("\\", "\\\\").replace(".", "\\.")


def _split_path(path: str) -> list[str]:
    """按未转义的 "." 切分路径"""
    parts: list[str] = []
    current: list[str] = []
    chars = iter(path)
    for ch in chars:
        if ch == "\\":
            current.append(next(chars, ""))
        elif ch == ".":
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def _walk(value: Any, path: list[str], values: dict[str, str]) -> Any:
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if isinstance(value, datetime):
        values[".".join(path)] = DATE_TAG
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {
            k: _walk(v, [*path, _escape(str(k))], values) for k, v in value.items()
        }
    if isinstance(value, list | tuple):
        return [_walk(v, [*path, str(i)], values) for i, v in enumerate(value)]
    return value


def serialize(data: Any) -> dict[str, Any]:
    """把响应数据编码为 {json, meta} 信封

    Args:
        data: pydantic 模型、模型列表或普通 JSON 兼容结构

    Returns:
        可直接 JSON 序列化的信封 dict
    """
    values: dict[str, str] = {}
    encoded = _walk(data, [], values)
    envelope: dict[str, Any] = {"json": encoded}
    if values:
        envelope["meta"] = {"values": values}
    return envelope


def _restore(node: Any, parts: list[str], tag: str) -> Any:
    if not parts:
        if tag == DATE_TAG and isinstance(node, str):
            return datetime.fromisoformat(node)
        return node
    head, rest = parts[0], parts[1:]
    if isinstance(node, list):
        index = int(head)
        node[index] = _restore(node[index], rest, tag)
    elif isinstance(node, dict) and head in node:
        node[head] = _restore(node[head], rest, tag)
    return node


def deserialize(envelope: dict[str, Any]) -> Any:
    """把 {json, meta} 信封还原为带 datetime 的 Python 结构"""
    data = envelope.get("json")
    values = (envelope.get("meta") or {}).get("values") or {}
    for path, tag in values.items():
        # 根节点本身为 datetime 时 path 为空串
        parts = _split_path(path) if path else []
        data = _restore(data, parts, tag)
    return data
