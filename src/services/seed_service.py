"""
种子数据导入服务
负责从 YAML 文件导入学院、课程、学生及其关联关系
"""
import json
import os
import yaml
from jsonschema import Draft7Validator
from exceptions import SeedDataError


_SCHEMA_PATH = os.path.join(
    os.path.dirname(__file__),
    '..', '..', 'data', 'schema.json'
)

_SCHEMA = None


def _load_schema():
    path = os.path.normpath(_SCHEMA_PATH)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


class SeedService:
    """种子数据导入服务"""

    @staticmethod
    def validate_yaml(yaml_path):
        """
        校验种子数据 YAML 文件是否符合 schema。

        Args:
            yaml_path: YAML 文件路径

        Returns:
            list[str]: 校验错误列表，空列表表示通过
        """
        global _SCHEMA
        if _SCHEMA is None:
            _SCHEMA = _load_schema()

        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        validator = Draft7Validator(_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))

        messages = []
        for err in errors:
            path = ' -> '.join(str(p) for p in err.absolute_path) or '(root)'
            messages.append(f"  [{path}] {err.message}")

        return messages

    def __init__(self, tx):
        """
        Args:
            tx: TransactionSession 实例
        """
        self.tx = tx

    def import_from_yaml(self, yaml_path):
        """
        从 YAML 文件导入种子数据

        流程：
        1. 校验 schema
        2. 依次导入 colleges, courses, students, offerings, enrollments
           （每条记录都走正常的业务操作，已存在的记录会被跳过）
        3. 提交

        Args:
            yaml_path: YAML 文件路径

        Returns:
            dict: 统计信息 {section: {'created': n, 'skipped': n}}
        """
        errors = SeedService.validate_yaml(yaml_path)
        if errors:
            raise SeedDataError(yaml_path, errors)

        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        print(f"\n{'='*60}")
        print(f"导入种子数据: {yaml_path}")
        print(f"{'='*60}")

        tx = self.tx
        # 按外键依赖顺序导入
        steps = [
            ('colleges', lambda r: tx.run(
                tx.colleges.add_college, r['id'], r['name'], r['fees'])),
            ('courses', lambda r: tx.run(
                tx.courses.add_course, r['id'], r['name'], r['duration'])),
            ('students', lambda r: tx.run(
                tx.students.add_student, r['id'], r['name'], r['age'], r.get('college_choice'))),
            ('offerings', lambda r: tx.run(
                tx.relationships.offer_course_at_college, r['college_id'], r['course_id'])),
            ('enrollments', lambda r: tx.run(
                tx.relationships.enroll_student_in_course, r['student_id'], r['course_id'])),
        ]

        stats = {}
        for section, apply in steps:
            records = data.get(section, [])
            section_stats = {'created': 0, 'skipped': 0}
            for record in records:
                outcome = apply(record)
                if outcome.rejected:
                    section_stats['skipped'] += 1
                    print(f"  ⚠️ 跳过 {section} {record}: {outcome.message}")
                else:
                    section_stats['created'] += 1
            stats[section] = section_stats
            print(f"✓ {section}: 新建 {section_stats['created']}, 跳过 {section_stats['skipped']}")

        tx.commit()
        print(f"\n{'='*60}")
        print("✓ 导入完成！")
        print(f"{'='*60}\n")
        return stats
