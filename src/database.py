"""
数据库连接管理
"""
import os
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
from exceptions import ConfigurationError
from models import Base

# 加载 .env 文件中的环境变量
load_dotenv()


def build_database_url():
    """
    从环境变量构建数据库 URL

    优先使用 DATABASE_URL（如 sqlite:///college.db），
    否则用 DB_HOST / DB_PORT / DB_NAME / DB_USER / DB_PASSWORD 拼接 MySQL URL。

    Returns:
        str: SQLAlchemy 数据库 URL
    """
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    db_host = os.getenv('DB_HOST')
    db_port = os.getenv('DB_PORT', '3306')
    db_name = os.getenv('DB_NAME')
    db_user = os.getenv('DB_USER')
    db_password = os.getenv('DB_PASSWORD')

    # 验证配置完整性
    if not all([db_host, db_name, db_user, db_password]):
        raise ConfigurationError(
            "数据库配置不完整！请检查 .env 文件是否包含所有必需的配置：\n"
            "DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASSWORD（或直接设置 DATABASE_URL）"
        )

    return f"mysql+pymysql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite 默认不执行外键约束，级联删除依赖它
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """数据库连接管理类"""

    def __init__(self, url=None, echo=None):
        """
        Args:
            url: 数据库 URL，不传则从环境变量读取
            echo: 是否打印 SQL，不传则读取 DB_ECHO
        """
        self.url = url or build_database_url()
        if echo is None:
            echo = os.getenv('DB_ECHO', '0').lower() in ('1', 'true', 'yes')
        self.echo = echo
        self.engine = None
        self.Session = None
        self._init_engine()

    def _init_engine(self):
        """初始化数据库引擎"""
        backend = make_url(self.url).get_backend_name()

        if backend == 'sqlite':
            self.engine = create_engine(self.url, echo=self.echo)
            event.listen(self.engine, 'connect', _enable_sqlite_foreign_keys)
        else:
            self.engine = create_engine(
                self.url,
                pool_pre_ping=True,      # 连接前先 ping，确保连接有效
                pool_recycle=3600,       # 1小时后回收连接
                echo=self.echo,          # 设置为 True 可以看到所有 SQL 语句（调试用）
            )

        # 创建 Session 类（提交/回滚只由调用方决定）
        self.Session = sessionmaker(bind=self.engine)

    @property
    def backend(self):
        return self.engine.dialect.name

    def test_connection(self):
        """测试数据库连接"""
        try:
            with self.engine.connect() as connection:
                if self.backend == 'sqlite':
                    version = connection.execute(text("SELECT sqlite_version()")).scalar()
                else:
                    version = connection.execute(text("SELECT VERSION()")).scalar()
                print("✓ 数据库连接成功！")
                print(f"{self.backend} 版本: {version}")
                return True
        except SQLAlchemyError as e:
            print(f"✗ 数据库连接失败: {e}")
            return False

    def create_tables(self):
        """创建所有数据表（仅创建不存在的表）"""
        try:
            Base.metadata.create_all(self.engine)
            print("✓ 数据表创建/确认成功！")
            # 验证关键表是否存在
            existing_tables = inspect(self.engine).get_table_names()
            expected_tables = [t.name for t in Base.metadata.sorted_tables]
            missing = [t for t in expected_tables if t not in existing_tables]
            if missing:
                print(f"⚠️ 以下表未创建成功: {missing}")
                return False
            print(f"  已确认 {len(expected_tables)} 张表存在: {expected_tables}")
            return True
        except SQLAlchemyError as e:
            print(f"✗ 创建数据表失败: {e}")
            return False

    def get_session(self):
        """获取数据库会话"""
        return self.Session()

    def dispose(self):
        """释放连接池"""
        self.engine.dispose()
