from distributed_load.main import run

run()
