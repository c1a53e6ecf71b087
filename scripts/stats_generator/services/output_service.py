#------------------------------------------------------------
#                      output_service.py
#              Writes the rendered chart to disk.

# This function does save the chart document to the given path.
# It overwrites the target file with UTF-8 content.
def save_chart(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8") as file_handle:
        file_handle.write(content)
