#!/usr/bin/env python3
# reposync：让本地目录与 GitHub 用户/组织的仓库列表保持一致
#
# 使用方式：
#   python main.py -org <org> -dir <dir> -archivedir <archivedir> -token <token>
#   python main.py -version

import sys

from reposync.cli import main

if __name__ == '__main__':
    sys.exit(main())
