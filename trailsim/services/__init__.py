"""Services connecting the core engine to storage"""
