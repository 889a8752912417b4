"""User Domain Model

被动元数据载体；Project 与 Task 通过 id 引用 User，User 自身不持有关系。
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User 数据模型"""

    model_config = ConfigDict(validate_assignment=True)

    id: str | None = Field(default=None, description="唯一标识；None 表示尚未分配")
    username: str = Field(description="登录名")
    email: str | None = Field(default=None, description="邮箱地址")
    full_name: str = Field(default="", description="全名")

    def has_valid_email(self) -> bool:
        """基础邮箱校验：非空且同时包含 "@" 与 "."

        刻意保持弱校验，不检查两者顺序或域名结构。
        """
        if not self.email:
            return False
        return "@" in self.email and "." in self.email

    def __str__(self) -> str:
        return (
            f"User{{id='{self.id}', username='{self.username}', "
            f"email='{self.email}', fullName='{self.full_name}'}}"
        )
