class FatalIOFault(Exception):
    """终端输入/渲染层不可恢复的错误，进程以非零状态退出。"""
