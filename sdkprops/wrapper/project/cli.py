#!/usr/bin/env python3
"""
项目属性命令行入口

查看和修改项目目录下的 default.properties

Usage:
    sdkprops <project_dir> [options]

Options:
    --get NAME              输出属性值（未设置时退出码为 1）
    --set NAME=VALUE        设置属性并保存（可重复）
    --unset NAME            移除属性并保存（可重复）
    --list                  按 key 排序输出所有属性
    --create                属性文件不存在时从空属性开始
    --dry-run               仅输出将要写入的内容，不实际保存
    --config PATH           工具配置文件（默认：~/.sdkprops/config.yaml）
    --verbose, -v           输出日志到 stderr
    --help, -h              显示帮助

Exit codes:
    0 成功；1 属性文件不存在/无效或参数错误；2 保存失败
"""
import argparse
import sys
from typing import List, Optional, Tuple

from ...core.config import ConfigError, ConfigLoader
from ...core.project import ProjectProperties, PROPERTIES_FILE
from ...lib.logger import cleanup_old_logs, get_logger


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_IO_ERROR = 2


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog='sdkprops',
        description='项目 default.properties 查看与修改工具',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'project_dir',
        help='项目目录'
    )

    parser.add_argument(
        '--get',
        metavar='NAME',
        help='输出属性值',
        default=None
    )

    parser.add_argument(
        '--set',
        metavar='NAME=VALUE',
        action='append',
        dest='set_values',
        default=[],
        help='设置属性（可重复）'
    )

    parser.add_argument(
        '--unset',
        metavar='NAME',
        action='append',
        dest='unset_names',
        default=[],
        help='移除属性（可重复）'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='输出所有属性'
    )

    parser.add_argument(
        '--create',
        action='store_true',
        help='属性文件不存在时从空属性开始'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='仅输出将要写入的内容'
    )

    parser.add_argument(
        '--config',
        help='工具配置文件路径',
        default=None
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='输出日志到 stderr'
    )

    return parser.parse_args(argv)


def split_assignment(text: str) -> Tuple[str, str]:
    """
    解析 NAME=VALUE

    Raises:
        ValueError: 缺少 '=' 或 NAME 为空
    """
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise ValueError(f"无效的属性赋值: '{text}'（应为 NAME=VALUE）")
    return name, value


def run(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # 只有命令行入口写日志文件，库模块的日志一并收进来
    logger = get_logger("cli", verbose=args.verbose)
    logger.capture("config", "properties")

    try:
        config = ConfigLoader(args.config).load()
    except ConfigError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND

    if config.logging.verbose:
        logger.enable_console()
    cleanup_old_logs(config.logging.retention_days)

    logger.log_separator("sdkprops Session Start")
    logger.info(f"Project dir: {args.project_dir}")
    logger.debug(f"Arguments: {vars(args)}")

    try:
        assignments = [split_assignment(item) for item in args.set_values]
    except ValueError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND

    props = ProjectProperties.load(args.project_dir, encoding=config.encoding)
    if props is None:
        if not args.create:
            logger.error(f"No valid {PROPERTIES_FILE} in {args.project_dir}")
            print(f"Error: {args.project_dir} 中没有有效的 {PROPERTIES_FILE}", file=sys.stderr)
            print("使用 --create 创建新的属性文件")
            return EXIT_NOT_FOUND
        logger.info("Starting from empty properties")
        props = ProjectProperties.create(args.project_dir, encoding=config.encoding)

    for name in args.unset_names:
        if props.remove_property(name) is None:
            logger.warning(f"Property '{name}' was not set")

    for name, value in assignments:
        logger.debug(f"Set {name}={value}")
        props.set_property(name, value)

    # 新建或有修改时写文件
    if assignments or args.unset_names or (args.create and not props.properties_path.exists()):
        if args.dry_run:
            print(props.to_text(), end='')
        else:
            try:
                props.save()
            except OSError as e:
                print(f"Error: 无法写入 {props.properties_path}: {e}", file=sys.stderr)
                logger.log_separator("sdkprops Session End")
                return EXIT_IO_ERROR
            logger.info(f"Saved {props.properties_path}")

    if args.list:
        for name in props.keys():
            print(f"{name}={props.get_property(name)}")

    exit_code = EXIT_OK
    if args.get is not None:
        value = props.get_property(args.get)
        if value is None:
            print(f"Error: 属性 '{args.get}' 未设置", file=sys.stderr)
            exit_code = EXIT_NOT_FOUND
        else:
            print(value)

    logger.log_separator("sdkprops Session End")
    return exit_code


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
