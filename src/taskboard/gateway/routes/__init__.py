"""Gateway 路由 -- RPC 过程与健康检查"""
