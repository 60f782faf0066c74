#!/usr/bin/env python3
"""
种子数据导入脚本
从 YAML 文件读取学院、课程、学生及关联关系并导入数据库

使用方法：
  python scripts/import_seed_data.py
  python scripts/import_seed_data.py --file data/seed.yml
  python scripts/import_seed_data.py --validate
"""
import sys
import os
import argparse

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from database import Database
from exceptions import ConfigurationError, SeedDataError, StoreFault
from services import SeedService, TransactionSession

DEFAULT_SEED_FILE = os.path.join(os.path.dirname(__file__), '..', 'data', 'seed.yml')


def parse_args():
    parser = argparse.ArgumentParser(
        description='导入种子数据（从 YAML 文件）',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python scripts/import_seed_data.py                        # 导入 data/seed.yml
  python scripts/import_seed_data.py --file my_seed.yml     # 导入指定文件
  python scripts/import_seed_data.py --validate             # 仅校验格式（不需要数据库）
        """
    )
    parser.add_argument(
        '--file',
        default=DEFAULT_SEED_FILE,
        help='种子数据 YAML 文件路径（默认 data/seed.yml）'
    )
    parser.add_argument(
        '--validate',
        action='store_true',
        help='仅校验 YAML 文件格式，不写入数据库'
    )
    parser.add_argument(
        '--database-url',
        help='数据库 URL（覆盖 .env 配置）'
    )
    return parser.parse_args()


def run_validate(yaml_path):
    print("=" * 60)
    print("YAML 文件 Schema 校验")
    print("=" * 60)

    errors = SeedService.validate_yaml(yaml_path)
    if errors:
        print(f"✗ {os.path.basename(yaml_path)}")
        for msg in errors:
            print(msg)
        print("\n文件存在错误，请修复后再导入 ✗")
        sys.exit(1)

    print(f"✓ {os.path.basename(yaml_path)}")
    print("\n文件校验通过 ✓")


def main():
    args = parse_args()
    yaml_path = os.path.normpath(args.file)

    if not os.path.exists(yaml_path):
        print(f"⚠️ 未找到 YAML 文件: {yaml_path}")
        sys.exit(1)

    if args.validate:
        run_validate(yaml_path)
        return

    print("=" * 60)
    print("种子数据导入")
    print("=" * 60)

    print("初始化数据库连接...")
    try:
        db = Database(url=args.database_url)
    except ConfigurationError as e:
        print(f"✗ {e}")
        sys.exit(1)

    if not db.test_connection():
        print("\n数据库连接失败，请检查 .env 配置")
        sys.exit(1)

    if not db.create_tables():
        print("\n数据表创建失败，程序终止")
        sys.exit(1)
    print()

    with TransactionSession(db.get_session()) as tx:
        try:
            stats = SeedService(tx).import_from_yaml(yaml_path)
        except SeedDataError as e:
            print(f"✗ {e}")
            sys.exit(1)
        except StoreFault as e:
            print(f"✗ 导入失败，已回滚: {e}")
            sys.exit(1)

    db.dispose()

    print("=" * 60)
    created = sum(s['created'] for s in stats.values())
    skipped = sum(s['skipped'] for s in stats.values())
    print(f"导入完成！新建: {created}, 跳过: {skipped}")
    print("=" * 60)


if __name__ == "__main__":
    main()
