from dnsblock.cli import cli

cli(prog_name="dnsblock")
