from playstate.app import run

run()
