import builtins

import pytest

import main
from services import Outcome


@pytest.fixture
def feed_input(monkeypatch):
    def feed(*answers):
        replies = iter(answers)
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(replies))
    return feed


def test_menu_numbering_matches_commit_and_rollback():
    assert main.COMMIT_CHOICE == 27
    assert main.ROLLBACK_CHOICE == 28


def test_menu_session_adds_and_commits(tx, feed_input, capsys):
    feed_input(
        "2", "1", "Tech", "1000",        # 添加学院
        "1", "10", "Amy", "20", "1",     # 添加学生
        "27",                            # 提交
        "24",                            # 平均年龄报表
        "0",                             # 退出
    )

    assert main.run_menu(tx) == 0

    out = capsys.readouterr().out
    assert "✓ 学院添加成功！" in out
    assert "✓ 学生添加成功！" in out
    assert "✓ 已提交" in out
    assert "college_id: 1, avg_age: 20.0" in out
    assert tx.pending_changes == 0


def test_menu_blank_answers_skip_update_fields(campus, feed_input, capsys):
    feed_input("18", "10", "", "", "0")

    main.run_menu(campus)

    assert "✗ 未提供任何更新内容" in capsys.readouterr().out


def test_menu_warns_about_uncommitted_work_on_exit(tx, feed_input, capsys):
    feed_input("3", "5", "CS101", "4", "99")

    main.run_menu(tx)

    assert "1 个未提交的操作将被丢弃" in capsys.readouterr().out


def test_menu_exit_after_only_rejections_has_no_warning(campus, feed_input, capsys):
    feed_input("2", "1", "Tech", "1000", "99")

    main.run_menu(campus)

    out = capsys.readouterr().out
    assert "✗ 学院 ID 1 已存在" in out
    assert "未提交的操作将被丢弃" not in out


def test_read_int_retries_until_valid(feed_input, capsys):
    feed_input("abc", "7")

    assert main.read_int("> ") == 7
    assert "输入无效" in capsys.readouterr().out


def test_render_prints_warnings(capsys):
    main.render(Outcome.success("选课成功！", warnings=["注意"]))

    out = capsys.readouterr().out
    assert "⚠️ 注意" in out
    assert "✓ 选课成功！" in out


def test_main_runs_against_sqlite(feed_input, capsys):
    feed_input("21", "0")

    exit_code = main.main(["--database-url", "sqlite://", "--create-tables"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "所有学院：" in out
    assert "程序结束" in out
