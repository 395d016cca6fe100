# check_db.py
# 命令行执行一次数据库连通性检查，成功返回 0，否则返回 1
import sys

from app.config import Settings
from app.probe import check_database, describe_target


def main() -> int:
    # 1. 读取配置（含 .env）
    settings = Settings.from_env()

    print(f"[INFO] 正在连接数据库: {describe_target(settings)}")

    # 2. 建立一次连接并输出结果
    result = check_database(settings)
    print(result.text)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
