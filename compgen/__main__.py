from compgen.cli import run

run()
