# emGateway Module - Command Line
# -*- coding: utf-8 -*-
"""
 Command line entry point for the energy management gateway

 Usage:
    python -m emgateway run [-host HOST] [-port PORT] [-debug]
    python -m emgateway version

 Settings not given on the command line come from EMG_* environment
 variables (see emgateway/config.py).
"""

import argparse
import sys

# Modules
from emgateway import version, set_debug
from emgateway.config import settings

# Setup parser and groups
p = argparse.ArgumentParser(prog="emGateway", description=f"emGateway Module v{version}")
subparsers = p.add_subparsers(dest="command", title='commands (run <command> -h to see usage information)',
                              required=True)

run_args = subparsers.add_parser("run", help='Serve the device REST API')
run_args.add_argument("-host", type=str, default=settings.server_host,
                      help=f"Address to bind [Default={settings.server_host}]")
run_args.add_argument("-port", type=int, default=settings.server_port,
                      help=f"Port to listen on [Default={settings.server_port}]")

version_args = subparsers.add_parser("version", help='Print version information')

# Add a global debug flag
p.add_argument("-debug", action="store_true", default=settings.debug, help="Enable debug output")

if len(sys.argv) == 1:
    p.print_help(sys.stderr)
    sys.exit(1)

args = p.parse_args()

if args.debug:
    set_debug(True)

# Run Mode
if args.command == 'run':
    import uvicorn
    from emgateway.main import app

    print(f"emGateway [{version}] - serving on {args.host}:{args.port}\n")
    uvicorn.run(app, host=args.host, port=args.port, log_level="debug" if args.debug else "info")

# Version Mode
elif args.command == 'version':
    print(f"emGateway [{version}]")
