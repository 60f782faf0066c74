#!/usr/bin/env python3
"""
数据完整性检查脚本
统计各表行数，并检查学生的学院志愿是否指向已存在的学院
"""
import sys
import os
import argparse

# 添加 src 目录到 Python 路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from database import Database
from exceptions import ConfigurationError
from services import ReportService


class DataIntegrityChecker:
    """数据完整性检查器"""

    def __init__(self, db):
        self.session = db.get_session()
        self.reports = ReportService(self.session)

        # 问题记录
        self.issues = {
            'dangling_choices': [],
        }

    def run(self):
        """
        运行完整性检查

        Returns:
            bool: 是否发现问题
        """
        print(f"\n{'='*70}")
        print("数据完整性检查")
        print(f"{'='*70}\n")

        try:
            # 1. 各表行数
            print("步骤 1: 统计各表行数...")
            print("-" * 70)
            self._print_counts()

            # 2. 检查学院志愿
            print("\n步骤 2: 检查学生的学院志愿...")
            print("-" * 70)
            self._check_college_choices()

            # 3. 汇总报告
            print("\n步骤 3: 生成汇总报告...")
            print("-" * 70)
            return self._generate_summary()
        finally:
            self.session.close()

    def _print_counts(self):
        """打印各表行数"""
        counts = self.reports.table_counts().data
        for table, count in counts.items():
            print(f"  {table:20s} {count:6d} 行")

    def _check_college_choices(self):
        """检查 college_choice 是否指向不存在的学院"""
        dangling = self.reports.dangling_college_choices().data
        self.issues['dangling_choices'] = dangling
        if dangling:
            print(f"✗ 发现 {len(dangling)} 名学生的志愿学院不存在")
        else:
            print("✓ 所有学生的学院志愿均有效")

    def _generate_summary(self):
        """打印汇总报告，返回是否有问题"""
        dangling = self.issues['dangling_choices']
        if not dangling:
            print("=" * 70)
            print(f"{'✓ 数据完整性检查通过！':^70}")
            print("=" * 70)
            return False

        print("【问题 1】学院志愿指向不存在的学院")
        print("-" * 70)
        for student in dangling[:20]:
            print(f"  • 学生 {student.id} ({student.name}) → 学院 {student.college_choice}")
        if len(dangling) > 20:
            print(f"  ... 还有 {len(dangling) - 20} 名学生")
        print()

        print("=" * 70)
        print(f"{'✗ 发现数据不一致，请检查上述问题':^70}")
        print("=" * 70)

        print("\n【诊断建议】")
        print("-" * 70)
        print("  1. Student.college_id_choice 外键缺少 ON DELETE SET NULL")
        print("     → 建议: 通过菜单“将学生移出学院”清空这些志愿，或为外键补充 SET NULL")
        return True


def parse_args():
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description='检查学生-学院-课程数据的完整性'
    )
    parser.add_argument(
        '--database-url',
        type=str,
        help='数据库 URL（覆盖 .env 配置）'
    )
    return parser.parse_args()


def main():
    """主函数"""
    args = parse_args()

    try:
        db = Database(url=args.database_url)
    except ConfigurationError as e:
        print(f"✗ {e}")
        sys.exit(1)

    has_issues = DataIntegrityChecker(db).run()
    db.dispose()
    sys.exit(1 if has_issues else 0)


if __name__ == "__main__":
    main()
