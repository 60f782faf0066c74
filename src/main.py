"""
主程序入口
交互式菜单：学生 / 学院 / 课程管理，提交与回滚由用户手动控制
"""
import sys
import os
import argparse
import logging
from database import Database
from exceptions import ConfigurationError, StoreFault
from services import TransactionSession


def parse_args(argv=None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description='学生-学院-课程数据库管理系统',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python src/main.py                                  # 使用 .env 中的 MySQL 配置
  python src/main.py --database-url sqlite:///college.db --create-tables
  python src/main.py --strict-enrollment              # 拒绝选修志愿学院未开设的课程
        """
    )

    parser.add_argument(
        '--database-url',
        type=str,
        help='数据库 URL（覆盖 .env 中的 DATABASE_URL / DB_* 配置）'
    )

    parser.add_argument(
        '--create-tables',
        action='store_true',
        help='启动时创建缺失的数据表'
    )

    parser.add_argument(
        '--strict-enrollment',
        action='store_true',
        default=os.getenv('STRICT_ENROLLMENT', '0').lower() in ('1', 'true', 'yes'),
        help='选课时课程必须由学生志愿学院开设（默认只给出警告）'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='日志级别（默认 WARNING）'
    )

    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# 输入工具
# ---------------------------------------------------------------------------

def read_int(prompt):
    """读取整数，输入非法时重新输入"""
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print("输入无效，请输入一个整数：")


def read_optional_int(prompt):
    """读取整数，直接回车表示跳过（返回 None）"""
    while True:
        raw = input(prompt).strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            print("输入无效，请输入一个整数，或直接回车跳过：")


def read_text(prompt):
    """读取非空文本"""
    while True:
        raw = input(prompt).strip()
        if raw:
            return raw
        print("不能为空，请重新输入：")


def read_optional_text(prompt):
    """读取文本，直接回车表示跳过（返回 None）"""
    raw = input(prompt).strip()
    return raw or None


# ---------------------------------------------------------------------------
# 菜单操作：每个函数读取输入，返回 (操作, 参数)
# ---------------------------------------------------------------------------

def add_student(tx):
    return tx.students.add_student, (
        read_int("学生 ID: "),
        read_text("学生姓名: "),
        read_int("学生年龄: "),
        read_optional_int("志愿学院 ID（直接回车表示不选）: "),
    )


def add_college(tx):
    return tx.colleges.add_college, (
        read_int("学院 ID: "),
        read_text("学院名称: "),
        read_int("学费: "),
    )


def add_course(tx):
    return tx.courses.add_course, (
        read_int("课程 ID: "),
        read_text("课程名称: "),
        read_int("课程时长: "),
    )


def set_college_choice(tx):
    return tx.students.set_college_choice, (
        read_int("学生 ID: "),
        read_int("学院 ID: "),
    )


def clear_college_choice(tx):
    return tx.students.clear_college_choice, (read_int("学生 ID: "),)


def delete_course(tx):
    return tx.courses.delete_course, (read_int("课程 ID: "),)


def delete_student(tx):
    return tx.students.delete_student, (read_int("学生 ID: "),)


def delete_college(tx):
    return tx.colleges.delete_college, (read_int("学院 ID: "),)


def update_college_fee(tx):
    return tx.colleges.update_college_fee, (
        read_int("学院 ID: "),
        read_int("新学费: "),
    )


def add_college_then_assign_student(tx):
    return tx.students.add_college_then_assign_student, (
        read_int("新学院 ID: "),
        read_text("新学院名称: "),
        read_int("学费: "),
        read_int("要分配到新学院的学生 ID: "),
    )


def offer_course(tx):
    return tx.relationships.offer_course_at_college, (
        read_int("学院 ID: "),
        read_int("课程 ID: "),
    )


def enroll_student(tx):
    return tx.relationships.enroll_student_in_course, (
        read_int("学生 ID: "),
        read_int("课程 ID: "),
    )


def unenroll_student(tx):
    return tx.relationships.unenroll_student_from_course, (
        read_int("学生 ID: "),
        read_int("课程 ID: "),
    )


def update_student_details(tx):
    return tx.students.update_student_details, (
        read_int("学生 ID: "),
        read_optional_text("新姓名（直接回车跳过）: "),
        read_optional_int("新年龄（直接回车跳过）: "),
    )


def update_course_details(tx):
    return tx.courses.update_course_details, (
        read_int("课程 ID: "),
        read_optional_text("新名称（直接回车跳过）: "),
        read_optional_int("新时长（直接回车跳过）: "),
    )


def withdraw_course(tx):
    return tx.relationships.withdraw_course_from_college, (
        read_int("学院 ID: "),
        read_int("课程 ID: "),
    )


def students_of_college(tx):
    return tx.reports.students_of_college, (read_int("学院 ID: "),)


def courses_of_college(tx):
    return tx.reports.courses_of_college, (read_int("学院 ID: "),)


def enrolled_courses(tx):
    return tx.reports.enrolled_courses_of_student, (read_int("学生 ID: "),)


def search_students(tx):
    return tx.reports.search_students_by_name, (read_optional_text("学生姓名（部分匹配）: ") or '',)


def no_args(attribute, name):
    def prompt(tx):
        return getattr(getattr(tx, attribute), name), ()
    return prompt


# (菜单文字, 参数读取函数, 是否写操作)
MENU = [
    ("添加学生", add_student, True),
    ("添加学院", add_college, True),
    ("添加课程", add_course, True),
    ("将学生加入学院", set_college_choice, True),
    ("更新学生的学院志愿", set_college_choice, True),
    ("将学生移出学院", clear_college_choice, True),
    ("删除课程", delete_course, True),
    ("删除学生", delete_student, True),
    ("删除学院", delete_college, True),
    ("更新学院学费", update_college_fee, True),
    ("查看学院的所有学生", students_of_college, False),
    ("查看学院的所有课程", courses_of_college, False),
    ("新建学院并更新学生志愿", add_college_then_assign_student, True),
    ("学院开设课程", offer_course, True),
    ("学生选课", enroll_student, True),
    ("学生退课", unenroll_student, True),
    ("查看学生已选课程", enrolled_courses, False),
    ("更新学生信息", update_student_details, True),
    ("更新课程信息", update_course_details, True),
    ("查看所有学生", no_args('reports', 'list_students'), False),
    ("查看所有学院", no_args('reports', 'list_colleges'), False),
    ("查看所有课程", no_args('reports', 'list_courses'), False),
    ("报表：各学院学生人数", no_args('reports', 'students_per_college'), False),
    ("报表：各学院平均年龄", no_args('reports', 'average_age_per_college'), False),
    ("按姓名搜索学生", search_students, False),
    ("学院撤销课程", withdraw_course, True),
]

COMMIT_CHOICE = len(MENU) + 1
ROLLBACK_CHOICE = len(MENU) + 2


def display_menu():
    print("\n--- 菜单 ---")
    for idx, (label, _, _) in enumerate(MENU, 1):
        print(f"{idx}. {label}")
    print(f"{COMMIT_CHOICE}. 提交更改")
    print(f"{ROLLBACK_CHOICE}. 回滚到上次提交")
    print("其他数字: 退出")


def render(outcome):
    """把 Outcome 打印到控制台"""
    for warning in outcome.warnings:
        print(f"⚠️ {warning}")

    if not outcome.ok:
        print(f"✗ {outcome.message}")
        return

    data = outcome.data
    if not isinstance(data, (list, dict)):
        print(f"✓ {outcome.message}")
        return

    print(outcome.message)
    if isinstance(data, list):
        if not data:
            print("  (无记录)")
        for row in data:
            if isinstance(row, dict):
                print("  " + ", ".join(f"{k}: {v}" for k, v in row.items()))
            else:
                print(f"  {row}")
    else:
        for key, value in data.items():
            print(f"  {key}: {value}")


def run_menu(tx):
    """
    菜单主循环

    Returns:
        int: 进程退出码
    """
    while True:
        display_menu()
        choice = read_int("请输入选项: ")

        if choice == COMMIT_CHOICE:
            print("正在提交更改...")
            tx.commit()
            print("✓ 已提交")
            continue
        if choice == ROLLBACK_CHOICE:
            print("正在回滚到上次提交...")
            tx.rollback()
            print("✓ 已回滚")
            continue
        if not 1 <= choice <= len(MENU):
            if tx.pending_changes:
                print(f"⚠️ {tx.pending_changes} 个未提交的操作将被丢弃")
            print("正在退出程序...")
            return 0

        _, prompt, is_write = MENU[choice - 1]
        operation, args = prompt(tx)
        if is_write:
            outcome = tx.run(operation, *args)
        else:
            outcome = tx.read(operation, *args)
        render(outcome)


def main(argv=None):
    """主函数"""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    print("=" * 60)
    print("学生-学院-课程数据库管理系统")
    print("=" * 60)

    # 1. 初始化数据库
    print("正在连接数据库...")
    try:
        db = Database(url=args.database_url)
    except ConfigurationError as e:
        print(f"✗ {e}")
        return 1

    if not db.test_connection():
        print("\n数据库连接失败，请检查 .env 配置")
        return 1

    # 2. 创建表（可选）
    if args.create_tables and not db.create_tables():
        print("\n数据表创建失败，程序终止")
        return 1

    if args.strict_enrollment:
        print("模式: 严格选课（课程必须由志愿学院开设）")

    # 3. 进入菜单
    exit_code = 0
    tx = TransactionSession(db.get_session(), strict_offering=args.strict_enrollment)
    try:
        exit_code = run_menu(tx)
    except StoreFault as e:
        # 会话已回滚并关闭
        print(f"\n✗ 数据库错误，已回滚未提交的更改: {e}")
        exit_code = 1
    except (KeyboardInterrupt, EOFError):
        print("\n输入中断，未提交的更改将被丢弃")
    finally:
        tx.close()
        db.dispose()

    print("程序结束")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
