from solar_simulator.main import run

run()
