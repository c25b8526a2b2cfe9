# main.py
"""
Main entry point for the simulation sandbox.

This script orchestrates the entire simulation lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Builds the demo selected by `run_control.demo` ("carrom" or "life").
4. Runs the frame loop until the window closes or `max_steps` is reached.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config
import cProfile
import pstats
import io

DEMOS = ("carrom", "life")


def build_demo(config):
    """
    Creates the visualizer and simulation for the configured demo.

    The visualizer is created first because it decides the canvas size.

    Returns:
        tuple: (visualizer, simulation, advance) where `advance` moves the
        simulation forward by one frame.
    """
    demo = config['run_control'].get('demo', 'carrom')
    if demo not in DEMOS:
        msg = f"Configuration error: unknown demo '{demo}'. Expected one of {DEMOS}."
        logging.critical(msg)
        raise ValueError(msg)

    vis_params = config.get('visualization', {})

    if demo == 'carrom':
        from simulation import CarromSimulation
        from visualization import CarromVisualizer

        visualizer = CarromVisualizer(vis_params)
        sim = CarromSimulation(config['carrom'], visualizer.width, visualizer.height)
        return visualizer, sim, sim.step

    from life import LifeSimulation
    from visualization import LifeVisualizer

    visualizer = LifeVisualizer(vis_params)
    sim = LifeSimulation(config['life'], visualizer.width, visualizer.height)
    return visualizer, sim, lambda: sim.tick(visualizer.now())


def log_metrics(sim, step_num: int) -> None:
    """Aggregated DEBUG metrics for whichever simulation is running."""
    if hasattr(sim, 'kinetic_energy'):
        logging.debug(
            f"Step {step_num} | Mean speed: {sim.mean_speed():.4f} | "
            f"Kinetic energy: {sim.kinetic_energy():.4f}"
        )
    else:
        logging.debug(
            f"Step {step_num} | Generation: {sim.generation} | Population: {sim.population}"
        )


def main():
    """
    The main function to run the sandbox.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except Exception as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Sandbox Starting ---")

    run_params = config['run_control']
    visualizer, sim, advance = build_demo(config)

    log_throttle = run_params.get('log_throttle_steps', 300)
    max_steps = run_params.get('max_steps', 0) # 0 runs until the window closes
    profile = run_params.get('profile', False)
    profiler = cProfile.Profile() if profile else None

    running = True
    step_num = 0

    if profiler:
        profiler.enable()
    while running:
        advance()
        step_num += 1

        # The visualizer handles input and returns False once the user quits.
        if not visualizer.draw(sim):
            running = False

        if step_num % log_throttle == 0:
            logging.info(f"Frame {step_num}")
            log_metrics(sim, step_num)

        if max_steps and step_num >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping simulation.")
            running = False

    visualizer.close()
    logging.info("Simulation loop finished.")

    if profiler:
        profiler.disable()
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Sandbox Shutting Down ---")


if __name__ == "__main__":
    main()
