from .classes import eos_model, flash_status, class_dic
