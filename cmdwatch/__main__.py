from cmdwatch.cli import main

main(prog_name="cmdwatch")
