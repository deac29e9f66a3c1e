#!/usr/bin/env python3
# setup.py：安装 reposync
#
# 安装方式：
#   pip install -e .            # 运行依赖
#   pip install -e ".[test]"    # 含测试依赖
#
# 启动方式：
#   reposync -org <org> -dir <dir> -archivedir <archivedir> -token <token>
#   python main.py ...          # 源码目录下运行

from setuptools import setup, find_packages

# 读取 README.md 作为长描述
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Sync a folder of git checkouts with a GitHub user or organization"

setup(
    name="github-repos-reposync",
    version="1.0.0",
    description="Clone missing and archive stale checkouts of a GitHub user or organization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # Windows 控制台 ANSI 颜色支持
        "keyring>=25.0",    # 从系统钥匙串读取 token
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "reposync=reposync.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
