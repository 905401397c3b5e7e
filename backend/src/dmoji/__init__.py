"""
dmoji：基于 Unicode emoji 序列数据表的 emoji 选择器。

定位：
- domain/：数据表解析（行扫描 → 序列解析 → catalog 构建），不依赖文件系统与外部进程。
- infra/：数据目录定位、外部菜单（dmenu）与剪贴板（wl-copy）进程的薄封装。
- api/：同一份 catalog 的 HTTP 查询服务（FastAPI）。
- cli.py：命令行入口（pick / list / lookup / serve）。
"""

__version__ = "0.1.0"
