# -*- coding: utf-8 -*-
"""
Created on Thu Jul 31 13:44:45 2025

@author: corma
"""
#Data_Analysis
import pickle
import os
import glob
from analysis import plot_time_series, plot_errors

def load_pickle_file(filepath):
    """
    Loads data from a single .pkl file.

    Args:
        filepath (str): The path to the .pkl file.

    Returns:
        dict: The data loaded from the file, or None if an error occurs.
    """
    try:
        with open(filepath, 'rb') as f:
            data = pickle.load(f)
        return data
    except Exception as e:
        print(f"Error loading file {filepath}: {e}")
        return None

def generate_individual_plots(directory='.', output_dir='plots'):
    """
    Finds all .pkl sweep results, loads them, and saves a time series plot
    for every case plus an error summary plot for each file.
    """
    # Create the output directory if it doesn't exist
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
        print(f"Created output directory: {output_dir}")

    # Find all .pkl files in the specified directory
    file_paths = glob.glob(os.path.join(directory, '*.pkl'))

    if not file_paths:
        print("No .pkl files found in the current directory.")
        return []

    saved = []
    for path in file_paths:
        base_name = os.path.splitext(os.path.basename(path))[0]
        print(f"\nProcessing file: {base_name}.pkl")

        data = load_pickle_file(path)
        if not data:
            continue

        for case_name, res in data.items():
            if 'time_points' not in res:
                print(f"Skipping time series plot for {case_name}: 'time_points' not found.")
                continue
            plot_filename = os.path.join(output_dir, f'timeseries_{base_name}_{case_name}.png')
            plot_time_series(res, show=False, filename=plot_filename)
            saved.append(plot_filename)
            print(f"  - Saved time series plot to {plot_filename}")

        plot_filename = os.path.join(output_dir, f'errors_{base_name}.png')
        plot_errors(data, show=False, filename=plot_filename)
        saved.append(plot_filename)
        print(f"  - Saved error plot to {plot_filename}")

    return saved

if __name__ == '__main__':
    # This will run the analysis on all .pkl files in the same
    # directory as the script and save the plots in a 'plots' subfolder.
    generate_individual_plots()
