# Reference data package init
