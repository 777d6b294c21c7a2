"""Taskboard -- 待办事项：任务创建 / 列表 / 状态切换 / 删除"""
