import asyncio
import sys

from lumen_tools.config_reader import load_settings
from lumen_tools.loguru_tools import init_sentry, safe_catch_async, setup_logging
from lumen_tools.stellar.commands import cmd_check_balances, cmd_create_accounts, cmd_send_payments

COMMANDS = {
    'check_balances': cmd_check_balances,
    'send_payments': cmd_send_payments,
    'create_accounts': cmd_create_accounts,
}


@safe_catch_async
async def run_command(name: str) -> None:
    settings = load_settings()
    setup_logging(settings.log_file, settings.log_level)
    init_sentry(settings.sentry_dsn)
    lines = await COMMANDS[name](settings)
    print('\n'.join(lines))


if __name__ == "__main__":
    command = next((arg for arg in sys.argv[1:] if arg in COMMANDS), None)
    if command is None:
        print(f"need more parameters: {' | '.join(COMMANDS)}")
        sys.exit(1)
    asyncio.run(run_command(command))
